from .entity import AggregateRoot as AggregateRoot
from .entity import Entity as Entity
from .exception import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exception import (
    DomainException as DomainException,
)
from .exception import (
    DuplicateResourceException as DuplicateResourceException,
)
from .exception import (
    NotFoundError as NotFoundError,
)
from .exception import (
    ValidationError as ValidationError,
)
from .repository import Repository as Repository
from .value_object import (
    Currency as Currency,
)
from .value_object import (
    Money as Money,
)
from .value_object import (
    SequentialId as SequentialId,
)
