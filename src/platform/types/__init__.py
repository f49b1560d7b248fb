from src.platform.types.uuid7_utils_types import generate_uuid7

__all__ = ['generate_uuid7']
