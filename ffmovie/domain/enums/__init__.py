from ffmovie.domain.enums.error_code import ErrorCode
from ffmovie.domain.enums.provider_kind import ProviderKind
__all__ = [
    "ErrorCode",
    "ProviderKind",
]
