class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ValidationError(DomainException):
    """入力値が不正、または論理的に矛盾している場合"""

    pass


class NotFoundError(DomainException):
    """参照先のリソースが見つからない場合"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（条件付き書き込みの失敗時）"""

    pass
