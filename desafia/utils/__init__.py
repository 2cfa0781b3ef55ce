__all__ = ['DecimalJsonEncoder']
from .decimal_json_encoder import DecimalJsonEncoder
