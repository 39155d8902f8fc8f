"""variates: seeded pseudo-random variate generation.

Integer-range sampling and a fixed catalogue of continuous distributions,
all drawing from one explicit ``UniformSource``.

Flat imports (preferred):
    from variates import seed, randint, gammavariate, UniformSource

Submodule imports (for organization):
    from variates.integers import randrange, sample, RangeSpec
    from variates.continuous import vonmisesvariate
    from variates.errors import EmptyRangeError

Module-level functions draw from the process-wide source. Pass ``source=`` to
draw from your own handle instead:

    ```python
    import variates

    variates.seed(7)
    variates.randint(1, 6)

    rng = variates.UniformSource(seed=7)
    variates.sample(1, 49, 6, unique=True, source=rng)
    ```
"""

from variates._config import VariatesConfig, get_config, init
from variates._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)
from variates._source import UniformSource, get_source, reset, seed, set_source
from variates.continuous import (
    betavariate,
    expovariate,
    gammavariate,
    gauss,
    normalvariate,
    paretovariate,
    random,
    triangular,
    uniform,
    vonmisesvariate,
    weibullvariate,
)
from variates.errors import (
    EmptyRange,
    EmptyRangeError,
    InvalidArgument,
    InvalidArgumentError,
    RangeTooSmall,
    RangeTooSmallError,
    VariatesError,
    ZeroStep,
    ZeroStepError,
)
from variates.integers import RangeSpec, probability, randint, randrange, sample

__version__ = '0.1.0'

__all__ = [
    # Errors - struct variants
    'EmptyRange',
    # Errors - exception variants
    'EmptyRangeError',
    'InvalidArgument',
    'InvalidArgumentError',
    # Integer ranges
    'RangeSpec',
    'RangeTooSmall',
    'RangeTooSmallError',
    # Uniform core
    'UniformSource',
    # Config
    'VariatesConfig',
    'VariatesError',
    'ZeroStep',
    'ZeroStepError',
    '__version__',
    # Logging
    'add_log_hook',
    # Continuous
    'betavariate',
    'clear_log_hooks',
    'configure_logging',
    'expovariate',
    'gammavariate',
    'gauss',
    'get_config',
    'get_logger',
    'get_source',
    'init',
    'normalvariate',
    'paretovariate',
    'probability',
    'randint',
    'random',
    'randrange',
    'remove_log_hook',
    'reset',
    'sample',
    'seed',
    'set_source',
    'triangular',
    'uniform',
    'vonmisesvariate',
    'weibullvariate',
]
