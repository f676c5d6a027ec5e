from dataclasses import dataclass, field
from typing import Any, Optional, Tuple


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class ParamSpec:
    """One command-line parameter: how it is spelled, its type and default."""
    name: str
    help: str
    flags: Tuple[str, ...] = ()
    kind: str = "str"  # str | int | bool | flag | list | choice
    default: Any = None
    required: bool = False
    metavar: Optional[str] = None
    choices: Optional[Tuple[str, ...]] = None
    group: Optional[str] = None
    # option spellings accepted in place of a positional
    aliases: Tuple[str, ...] = ()

    @property
    def positional(self) -> bool:
        return not self.flags


PARAMETERS: Tuple[ParamSpec, ...] = (
    ParamSpec("name", "Path of the file to create", required=True),
    ParamSpec("size", "Size (e.g. 10K, 22.5M)", required=True, aliases=("-s", "--size")),
    ParamSpec("interactive", "Whether or not the program should be interactive. "
              "When off it will not prompt and will bail instead of overwriting "
              "an existing file unless --overwrite is given",
              flags=("--interactive",), kind="bool", default=True),
    ParamSpec("overwrite", "Overwrite an existing file without asking",
              flags=("--overwrite",), kind="flag", default=False),
    ParamSpec("random_bytes", "Fill with random bytes (the default when no pattern is given)",
              flags=("--random-bytes",), kind="flag", default=False, group="content"),
    ParamSpec("patterns", "Pattern to repeat; give it more than once to rotate "
              "randomly between patterns",
              flags=("--pattern", "-p"), kind="list", default=None, metavar="PATTERN",
              group="content"),
    ParamSpec("seed", "Random seed, for reproducible content",
              flags=("--seed",), kind="int"),
    ParamSpec("checksum", "Print the SHA-256 of the written content",
              flags=("--checksum",), kind="flag", default=False),
    ParamSpec("log_level", "Logging level", flags=("--log-level",), kind="choice",
              default="WARNING", choices=LOG_LEVELS),
)


@dataclass(frozen=True)
class Options:
    name: str
    size: str
    interactive: bool = True
    overwrite: bool = False
    random_bytes: bool = False
    patterns: Tuple[str, ...] = field(default_factory=tuple)
    seed: Optional[int] = None
    checksum: bool = False
    log_level: str = "WARNING"

    def __post_init__(self):
        object.__setattr__(self, "patterns", tuple(self.patterns or ()))
        self.validate()

    def validate(self) -> None:
        if any(not p for p in self.patterns):
            raise ValueError("Patterns must be non-empty")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level}")

    @classmethod
    def from_namespace(cls, ns) -> "Options":
        values = {spec.name: getattr(ns, spec.name, spec.default) for spec in PARAMETERS}
        return cls(**values)

    def create_kwargs(self) -> dict:
        """Keyword arguments accepted by ``create_random_file``."""
        return {
            "name": self.name,
            "size": self.size,
            "interactive": self.interactive,
            "overwrite": self.overwrite,
            "random_bytes": self.random_bytes,
            "patterns": list(self.patterns) or None,
            "checksum": self.checksum,
        }

