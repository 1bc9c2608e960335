"""Concrete algorithm registry wiring."""

from nlogin_web.application.services.algorithm_registry import AlgorithmRegistry
from nlogin_web.domain.services.password_hasher import HashAlgorithm
from nlogin_web.infrastructure.config.settings import Settings
from nlogin_web.infrastructure.security.bcrypt_password_hasher import BcryptPasswordHasher
from nlogin_web.infrastructure.security.sha_password_hasher import (
    AuthMePasswordHasher,
    Sha256PasswordHasher,
    Sha512PasswordHasher,
)


def create_algorithm_registry(settings: Settings) -> AlgorithmRegistry:
    """
    Build the registry of every supported strategy.

    Args:
        settings: Provides the current write algorithm and bcrypt cost

    Returns:
        AlgorithmRegistry writing with settings.hashing_algorithm
    """
    return AlgorithmRegistry(
        {
            HashAlgorithm.BCRYPT: BcryptPasswordHasher(rounds=settings.bcrypt_rounds),
            HashAlgorithm.SHA256: Sha256PasswordHasher(),
            HashAlgorithm.SHA512: Sha512PasswordHasher(),
            HashAlgorithm.AUTHME: AuthMePasswordHasher(),
        },
        current=HashAlgorithm(settings.hashing_algorithm),
    )
