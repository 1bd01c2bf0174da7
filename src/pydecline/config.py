"""Configuration file support for pydecline.

The numerical policy of the library is three numbers: the absolute float
tolerance, the maximum segment duration and the hyperbolic exponent ceiling.
The defaults reproduce the documented constants; a YAML file may override them
for callers that need a different tolerance policy.
"""

from dataclasses import asdict, dataclass, fields as dataclass_fields
import logging
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

# Absolute tolerance for floating-point comparisons and "effectively zero" checks.
EPSILON = 1e-12

# Upper bound on segment length, in average years.
MAX_DURATION_YEARS = 1000.0

# Upper bound on abs(b) for hyperbolic segments.
MAX_EXPONENT = 100.0


@dataclass(frozen=True)
class DeclineConfig:
    """Numerical limits shared by every validator and segment constructor.

    Attributes:
        epsilon: Absolute tolerance for approximate zero/equality checks (default 1e-12)
        max_duration_years: Longest allowed segment, in average years (default 1000)
        max_exponent: Largest allowed hyperbolic exponent magnitude (default 100)

    Values are validated on construction, so an invalid policy never reaches
    a segment constructor.
    """
    epsilon: float = EPSILON
    max_duration_years: float = MAX_DURATION_YEARS
    max_exponent: float = MAX_EXPONENT

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate configuration values.

        Raises:
            ValueError: If any configuration value is invalid
        """
        errors = []

        if not self.epsilon >= 0:
            errors.append(f"epsilon ({self.epsilon}) must be zero or greater")
        if not self.max_duration_years > 0:
            errors.append(
                f"max_duration_years ({self.max_duration_years}) must be greater than 0"
            )
        if not self.max_exponent > 1:
            errors.append(
                f"max_exponent ({self.max_exponent}) must be greater than 1"
            )

        if errors:
            raise ValueError("Invalid configuration:\n  - " + "\n  - ".join(errors))

    @classmethod
    def from_dict(cls, data: dict) -> "DeclineConfig":
        """Create configuration from dictionary.

        Unknown keys are logged as warnings and ignored, rather than causing
        opaque TypeErrors.

        Args:
            data: Configuration dictionary

        Returns:
            DeclineConfig instance
        """
        known_keys = {f.name for f in dataclass_fields(cls)}
        unknown_keys = set(data) - known_keys
        if unknown_keys:
            logger.warning(
                f"Unknown config key(s): {', '.join(sorted(unknown_keys))}. "
                f"Valid keys: {', '.join(sorted(known_keys))}"
            )
        return cls(**{k: float(v) for k, v in data.items() if k in known_keys})

    @classmethod
    def from_yaml(cls, filepath: Path | str) -> "DeclineConfig":
        """Load configuration from YAML file.

        Args:
            filepath: Path to YAML config file

        Returns:
            DeclineConfig instance

        Raises:
            ValueError: If configuration values are invalid
        """
        filepath = Path(filepath)
        with open(filepath) as f:
            data = yaml.safe_load(f) or {}

        config = cls.from_dict(data)
        logger.info(f"Loaded decline config from {filepath}")
        return config

    def to_dict(self) -> dict:
        """Convert configuration to dictionary."""
        return asdict(self)

    def to_yaml(self, filepath: Path | str) -> None:
        """Save configuration to YAML file.

        Args:
            filepath: Output file path
        """
        filepath = Path(filepath)
        with open(filepath, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)


DEFAULT_CONFIG = DeclineConfig()


def generate_default_config(filepath: Path | str) -> Path:
    """Generate a default configuration file.

    Args:
        filepath: Output file path

    Returns:
        Path to created file
    """
    filepath = Path(filepath)

    content = """# pydecline configuration file
# Numerical limits applied by every decline segment constructor

epsilon: 1.0e-12           # Absolute tolerance for zero/equality checks
max_duration_years: 1000.0 # Longest allowed segment (average years)
max_exponent: 100.0        # Largest allowed |b| for hyperbolic segments
"""

    with open(filepath, "w") as f:
        f.write(content)

    return filepath
