from .dimension import get_dimension, unpack_triple
from .default import value_or_default
from .num_utils import round_half_up, np_round_half_up, format_number, is_number

__all__ = [
    "get_dimension",
    "unpack_triple",
    "value_or_default",
    "round_half_up",
    "np_round_half_up",
    "format_number",
    "is_number",
]
