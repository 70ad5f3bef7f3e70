"""
Pydantic models for strategy options and operation metrics.
"""

from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .utils import InvalidStrategyError


class ChunkStrategy(str, Enum):
    """How chunk() treats a trailing partial group"""
    DROP_END = "dropEnd"
    KEEP_END = "keepEnd"
    PAD_END = "padEnd"
    STRICT = "strict"


class ZipStrategy(str, Enum):
    """When zip() stops combining iterables"""
    SHORTEST = "shortest"
    LONGEST = "longest"
    STRICT = "strict"


class StrategyOptions(BaseModel):
    """Base for option bundles made of a strategy and a fill value."""

    model_config = ConfigDict(frozen=True)

    @classmethod
    def resolve(cls, strategy: Any = None, fill_value: Any = None) -> "StrategyOptions":
        """Build the options, raising InvalidStrategyError for unknown strategies."""
        if "strategy" not in cls.model_fields:
            raise TypeError(f"{cls.__name__} declares no strategy; resolve a concrete options model")
        values = {"fill_value": fill_value}
        if strategy is not None:
            values["strategy"] = strategy
        try:
            return cls(**values)
        except ValidationError as e:
            accepted = [member.value for member in cls.model_fields["strategy"].annotation]
            raise InvalidStrategyError(strategy, accepted) from e


class ChunkOptions(StrategyOptions):
    """Options for chunk()"""
    strategy: ChunkStrategy = Field(
        ChunkStrategy.DROP_END,
        description="Treatment of a trailing partial chunk"
    )
    fill_value: Any = Field(
        None,
        description="Value padding the last chunk with the padEnd strategy"
    )


class ZipOptions(StrategyOptions):
    """Options for zip()"""
    strategy: ZipStrategy = Field(
        ZipStrategy.SHORTEST,
        description="Which iterable length decides the result length"
    )
    fill_value: Any = Field(
        None,
        description="Value standing in for exhausted iterables with the longest strategy"
    )


class OperationMetrics(BaseModel):
    """Timing and memory figures for one measured operation."""
    operation: str = Field(..., description="Name of the measured operation")
    execution_time_ms: float = Field(..., description="Wall time in milliseconds", ge=0)
    peak_memory_bytes: int = Field(..., description="Peak traced allocation in bytes", ge=0)
    success: bool = Field(True, description="Whether the operation returned normally")
    result_size: Optional[int] = Field(
        None,
        description="Length of the result when it is sized",
        ge=0
    )
    error: Optional[str] = Field(None, description="Error message of a failed operation")
