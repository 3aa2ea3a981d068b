from .currency import Currency as Currency
from .money import Money as Money
from .sequential_id import SequentialId as SequentialId
