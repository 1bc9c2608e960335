"""Algorithm registry - picks the hashing strategy for a stored credential.

nLogin tables accumulate hashes from several algorithms over time (imports
from AuthMe, older plugin versions, configuration changes). Every stored
hash names its algorithm between the first two '$' characters, so the
registry reads that token and routes to the matching strategy.

New hashes are always written with the configured *current* algorithm,
which is how credentials migrate: the next password change rewrites the
hash in the current format.
"""

from collections.abc import Mapping

from nlogin_web.domain.services.password_hasher import HashAlgorithm, IPasswordHasher

# Token between the first two '$' (upper-cased) -> algorithm
_TOKEN_TO_ALGORITHM: dict[str, HashAlgorithm] = {
    "2": HashAlgorithm.BCRYPT,
    "2A": HashAlgorithm.BCRYPT,
    "SHA256": HashAlgorithm.SHA256,
    "SHA512": HashAlgorithm.SHA512,
    "SHA": HashAlgorithm.AUTHME,
}


def parse_algorithm_token(hashed_password: str) -> str:
    """
    Extract the upper-cased algorithm token of a stored hash.

    Returns:
        The text between the first and second '$', or "" if there is no '$'

    Example:
        >>> parse_algorithm_token("$SHA256$salt$digest")
        'SHA256'
    """
    if "$" not in hashed_password:
        return ""
    return hashed_password.split("$")[1].upper()


class AlgorithmRegistry:
    """
    Holds one strategy per supported algorithm and detects stored formats.

    Usage:
        registry = AlgorithmRegistry(
            {HashAlgorithm.BCRYPT: BcryptPasswordHasher(), ...},
            current=HashAlgorithm.BCRYPT,
        )
        algorithm = registry.detect(stored_hash)
        if algorithm is HashAlgorithm.UNKNOWN:
            ...  # unverifiable, not a wrong password
        registry.hasher(algorithm).verify(password, stored_hash)
    """

    def __init__(
        self,
        hashers: Mapping[HashAlgorithm, IPasswordHasher],
        current: HashAlgorithm = HashAlgorithm.BCRYPT,
    ):
        """
        Initialize the registry.

        Args:
            hashers: Strategy instance per algorithm
            current: Algorithm used for every newly written hash

        Raises:
            ValueError: If UNKNOWN is registered or current has no strategy
        """
        if HashAlgorithm.UNKNOWN in hashers:
            raise ValueError("UNKNOWN cannot be registered as a hashing strategy")
        if current not in hashers:
            raise ValueError(f"No strategy registered for write algorithm {current.value}")

        self._hashers = dict(hashers)
        self._current = current

    @property
    def current(self) -> HashAlgorithm:
        """Algorithm used for newly written hashes."""
        return self._current

    @property
    def algorithms(self) -> frozenset[HashAlgorithm]:
        return frozenset(self._hashers)

    def detect(self, hashed_password: str) -> HashAlgorithm:
        """
        Detect which algorithm produced a stored hash.

        Args:
            hashed_password: Opaque stored hash

        Returns:
            The matching algorithm, or HashAlgorithm.UNKNOWN when the token
            is missing, unrecognised or has no registered strategy
        """
        algorithm = _TOKEN_TO_ALGORITHM.get(
            parse_algorithm_token(hashed_password), HashAlgorithm.UNKNOWN
        )
        if algorithm not in self._hashers:
            return HashAlgorithm.UNKNOWN
        return algorithm

    def hasher(self, algorithm: HashAlgorithm) -> IPasswordHasher:
        """
        Get the strategy for an algorithm.

        Raises:
            KeyError: If the algorithm is UNKNOWN or not registered
        """
        try:
            return self._hashers[algorithm]
        except KeyError:
            raise KeyError(f"No hashing strategy for {algorithm.value}") from None

    def hash(self, plain_password: str) -> str:
        """Hash a password with the current write algorithm."""
        return self._hashers[self._current].hash(plain_password)
