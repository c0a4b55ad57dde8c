"""Driver screen: what the UI shows for a given set of blocked functions."""

from __future__ import annotations

from collections.abc import Collection

from pydantic import BaseModel, ConfigDict, Field
from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from uxguard.models.restrictions import AppFunction, TruncatedText
from uxguard.policy.truncation import DEFAULT_MAX_TEXT_LENGTH, limit_display_text
from uxguard.render import strings


class ScreenModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    headline: str
    subheading: str | None = None
    bullets: list[str] = Field(default_factory=list)
    status: str = strings.STATUS_AUTO_UPDATED
    info: TruncatedText

    @property
    def all_clear(self) -> bool:
        return not self.bullets


def build_screen(
    blocked: Collection[AppFunction],
    *,
    info_text: str = strings.INFO_TEXT_LONG,
    max_length: int = DEFAULT_MAX_TEXT_LENGTH,
) -> ScreenModel:
    """Build the screen for ``blocked``.

    Blocked functions are listed in declaration order so the screen is stable
    whatever order the set iterates in.
    """
    info = limit_display_text(info_text, blocked=blocked, max_length=max_length)
    if not blocked:
        return ScreenModel(headline=strings.NO_FUNCTION_BLOCKED, info=info)

    return ScreenModel(
        headline=strings.SAFETY_MODE_ACTIVE,
        subheading=strings.FUNCTIONS_BLOCKED,
        bullets=[function.label for function in AppFunction if function in blocked],
        info=info,
    )


def render_screen(model: ScreenModel) -> Panel:
    body = Text(justify="center")
    body.append(f"{model.headline}\n", style="success" if model.all_clear else "warning")

    if model.subheading:
        body.append(f"\n{model.subheading}\n", style="white")
    for bullet in model.bullets:
        body.append(f"• {bullet}\n", style="white")

    body.append(f"\n{model.status}\n", style="info")

    info = Text(model.info.text, justify="center", style="dim")
    return Panel(
        Group(body, info),
        title="[bold]Driver screen[/bold]",
        subtitle="[dim]text limited[/dim]" if model.info.truncated else None,
        border_style="green" if model.all_clear else "yellow",
        padding=(1, 2),
    )


class ScreenPrinter:
    """State observer that prints a fresh screen on every change."""

    def __init__(
        self,
        console: Console,
        *,
        info_text: str = strings.INFO_TEXT_LONG,
        max_length: int = DEFAULT_MAX_TEXT_LENGTH,
    ) -> None:
        self._console = console
        self._info_text = info_text
        self._max_length = max_length
        self.renders = 0

    def __call__(self, blocked: Collection[AppFunction]) -> None:
        model = build_screen(blocked, info_text=self._info_text, max_length=self._max_length)
        self._console.print(render_screen(model))
        self.renders += 1
