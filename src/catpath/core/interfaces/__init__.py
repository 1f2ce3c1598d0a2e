from .fs import DirectoryCheckerProtocol
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol

__all__ = [
    'DirectoryCheckerProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
]
