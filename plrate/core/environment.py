"""the constants shared by every rating operation"""
import math
from dataclasses import dataclass, replace
from plrate.core.errors import ConfigurationError

MU = 25.0
Z = 3.0
SIGMA = MU / Z
BETA = SIGMA / 2.0
EPSILON = 0.0001
TAU = 0.0


@dataclass(frozen=True)
class Environment:
    """
    Read-only set of constants for the rating engine.

    Attributes:
        mu (float): mean of a brand new rating.
        sigma (float): standard deviation of a brand new rating.
        beta (float): performance noise of a single match around a player's skill.
        epsilon (float): floor applied to the sigma shrink factor so sigma stays positive.
        z (float): number of standard deviations subtracted by ordinal().
        tau (float): process variance added to every sigma before an update, 0 disables it.
        prevent_sigma_increase (bool): when tau > 0, never let an update leave sigma above its prior value.
    """

    mu: float = MU
    sigma: float = SIGMA
    beta: float = BETA
    epsilon: float = EPSILON
    z: float = Z
    tau: float = TAU
    prevent_sigma_increase: bool = False

    def __post_init__(self):
        for field in ('mu', 'sigma', 'beta', 'epsilon', 'z', 'tau'):
            if not math.isfinite(getattr(self, field)):
                raise ConfigurationError(field, 'must be a finite number')
        if self.sigma <= 0.0:
            raise ConfigurationError('sigma', 'must be greater than 0')
        if self.beta <= 0.0:
            raise ConfigurationError('beta', 'must be greater than 0')
        if self.epsilon <= 0.0:
            raise ConfigurationError('epsilon', 'must be greater than 0')
        if self.z < 0.0:
            raise ConfigurationError('z', 'must not be negative')
        if self.tau < 0.0:
            raise ConfigurationError('tau', 'must not be negative')

    @classmethod
    def create(cls, mu: float = MU, z: float = Z, **overrides):
        """build an environment where sigma = mu / z and beta = sigma / 2 unless given explicitly"""
        if z == 0.0 and 'sigma' not in overrides:
            raise ConfigurationError('z', 'must be non zero when sigma is derived from it')
        sigma = overrides.pop('sigma', mu / z if z else None)
        beta = overrides.pop('beta', sigma / 2.0)
        return cls(mu=mu, sigma=sigma, beta=beta, z=z, **overrides)

    def replace(self, **changes):
        """return a copy with some constants changed, this one is left untouched"""
        return replace(self, **changes)

    @property
    def beta_squared(self) -> float:
        return self.beta**2.0


DEFAULT_ENV = Environment()
