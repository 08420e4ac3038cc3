"""Animation sequences played on the game indicators.

An AnimationSequence is an ordered list of steps. Each step lights a set of
colors and holds them for a number of milliseconds; a step with no colors is
an "off" gap. After the last step the sequencer clears every indicator.
"""

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field

from .enums import ALL_COLORS, Color

# Hold durations (milliseconds)
BOOT_STEP_MS = 200
BOOT_FLASH_MS = 100
JOINED_STEP_MS = 200
JOINED_FLASH_MS = 100
INPUT_ENABLED_MS = 1000
LIGHT_UP_MS = 200
LOSS_PULSE_MS = 500
CLOSING_PULSE_MS = 2000
PULSE_GAP_MS = 250
PULSE_COUNT = 3


class AnimationStep(BaseModel):
    """One frame of an animation: which colors are lit and for how long."""

    model_config = ConfigDict(frozen=True)

    active_colors: frozenset[Color] = Field(
        default_factory=frozenset, description="Colors lit during this step"
    )
    hold_ms: int = Field(ge=0, description="How long the step is held (milliseconds)")

    @property
    def is_off(self) -> bool:
        """True if this step lights nothing."""
        return not self.active_colors

    @property
    def hold_seconds(self) -> float:
        """Hold duration in seconds."""
        return self.hold_ms / 1000.0


class AnimationSequence(BaseModel):
    """An ordered, non-interleavable list of animation steps."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Name used in logs")
    steps: tuple[AnimationStep, ...] = Field(default=(), description="Steps in play order")

    @property
    def duration_ms(self) -> int:
        """Total duration of all steps."""
        return sum(step.hold_ms for step in self.steps)

    def then(self, other: "AnimationSequence") -> "AnimationSequence":
        """Concatenate two sequences into one (keeps this sequence's name)."""
        return AnimationSequence(name=self.name, steps=self.steps + other.steps)


def step(colors: Iterable[Color], hold_ms: int) -> AnimationStep:
    """Build a step from any iterable of colors."""
    return AnimationStep(active_colors=frozenset(colors), hold_ms=hold_ms)


def pause(hold_ms: int) -> AnimationStep:
    """Build an 'all off' step."""
    return AnimationStep(hold_ms=hold_ms)


def flash(name: str, colors: Iterable[Color], hold_ms: int) -> AnimationSequence:
    """Light colors once, hold, then clear."""
    return AnimationSequence(name=name, steps=(step(colors, hold_ms),))


def pulse(
    name: str,
    colors: Iterable[Color],
    on_ms: int,
    off_ms: int = PULSE_GAP_MS,
    count: int = PULSE_COUNT,
) -> AnimationSequence:
    """Alternate colors and 'off' gaps ``count`` times."""
    colors = frozenset(colors)
    steps: list[AnimationStep] = []
    for _ in range(count):
        steps.append(step(colors, on_ms))
        steps.append(pause(off_ms))
    return AnimationSequence(name=name, steps=tuple(steps))


# ----------------------------------------------------------------------
# Named sequences
# ----------------------------------------------------------------------

def boot() -> AnimationSequence:
    """Start-up chase: each color in turn, then everything briefly."""
    steps = [step([color], BOOT_STEP_MS) for color in ALL_COLORS]
    steps.append(step(ALL_COLORS, BOOT_FLASH_MS))
    return AnimationSequence(name="boot", steps=tuple(steps))


def joined() -> AnimationSequence:
    """Played when the server announces the game has begun."""
    return AnimationSequence(
        name="joined",
        steps=(
            step([Color.YELLOW, Color.RED], JOINED_STEP_MS),
            step([Color.GREEN, Color.BLUE], JOINED_STEP_MS),
            step(ALL_COLORS, JOINED_FLASH_MS),
        ),
    )


def input_enabled() -> AnimationSequence:
    """All indicators lit once when the player may start pressing."""
    return flash("input_enabled", ALL_COLORS, INPUT_ENABLED_MS)


def light_up(color: Color) -> AnimationSequence:
    """Single color shown as part of the server's pattern."""
    return flash(f"light_up:{color.value}", [color], LIGHT_UP_MS)


def loss() -> AnimationSequence:
    """Three red pulses played as soon as the player loses."""
    return pulse("loss", [Color.RED], LOSS_PULSE_MS)


def closing(color: Color, delay_ms: int = 1000) -> AnimationSequence:
    """Final animation when the stream ends: a pause then three long pulses."""
    lead = AnimationSequence(name="closing", steps=(pause(delay_ms),) if delay_ms else ())
    return lead.then(pulse("closing", [color], CLOSING_PULSE_MS))
