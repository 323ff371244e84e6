"""Primary Typer application for the baziengine CLI."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Optional

import typer
import yaml

from ..chart import ChartResult, build_chart
from ..config import default_settings, ensure_default_config, load_settings
from ..providers import BirthMoment, CalendarKind, ChartUnavailable
from ..chinese.constants import Gender
from ..timelords import annual_pillars

app = typer.Typer(help="BaZi (Four Pillars) chart calculator.")

_MOMENT_PATTERN = re.compile(
    r"^\s*(?P<year>-?\d{1,4})-(?P<month>\d{1,2})-(?P<day>\d{1,2})"
    r"(?:[T ](?P<hour>\d{1,2}):(?P<minute>\d{2})(?::\d{2})?)?\s*$"
)


def _parse_moment(raw: str, *, lunar: bool, leap_month: bool) -> BirthMoment:
    """Split ``YYYY-MM-DD[THH:MM]`` without validating it against a calendar."""

    match = _MOMENT_PATTERN.match(raw)
    if match is None:
        raise typer.BadParameter(f"Invalid moment '{raw}'. Expected YYYY-MM-DDTHH:MM.")
    if leap_month and not lunar:
        raise typer.BadParameter("--leap-month requires --lunar.")
    return BirthMoment(
        year=int(match["year"]),
        month=int(match["month"]),
        day=int(match["day"]),
        hour=int(match["hour"] or 0),
        minute=int(match["minute"] or 0),
        calendar=CalendarKind.LUNAR if lunar else CalendarKind.SOLAR,
        leap_month=leap_month,
    )


def _echo_chart(result: ChartResult, year: Optional[int]) -> None:
    for pillar in result.chart:
        typer.echo(
            f"{pillar.position.title():<5}: {pillar.label()} ({pillar.pillar.pinyin()})"
            f"  {pillar.relationship.value}  {pillar.na_yin.name}"
        )
    day_master = result.day_master
    typer.echo(f"Day master: {day_master.chinese} ({day_master.polarity.value} {day_master.element.value})")
    typer.echo(f"Zodiac: {result.zodiac} ({result.zodiac_animal})")
    typer.echo(f"Shi chen: {result.shi_chen.label()}")
    typer.echo(f"Lunar date: {result.lunar.label()}")
    tally = "  ".join(f"{name}{count}" for name, count in result.elements.as_chinese().items())
    typer.echo(f"Elements: {tally}")

    if result.luck is None or result.onset is None:
        return
    typer.echo(f"Luck ({result.luck.direction.value}, {result.onset.label()}):")
    for period in result.luck:
        typer.echo(
            f"  {period.start_age:>2}-{period.end_age:<2} {period.start_year}-{period.end_year - 1}"
            f"  {period.label()}  {period.pillar.relationship.value}"
        )
    if year is None:
        return
    period = result.luck.at_year(year)
    if period is None:
        typer.echo(f"{year}: outside the luck-pillar timeline")
        return
    for annual in annual_pillars(period, result.day_master, result.luck.birth_year):
        if annual.year == year:
            typer.echo(
                f"{year} (age {annual.age}): luck {period.label()}, "
                f"annual {annual.pillar.label()} {annual.pillar.relationship.value}"
            )


@app.command("chart")
def cli_chart(
    moment: str = typer.Argument(..., metavar="ISO_LOCAL", help="Local birth moment, YYYY-MM-DDTHH:MM."),
    gender: Gender = typer.Option(..., "--gender", case_sensitive=False, help="Native's gender."),
    lunar: bool = typer.Option(False, "--lunar", help="Interpret ISO_LOCAL as a Chinese lunar date."),
    leap_month: bool = typer.Option(False, "--leap-month", help="The lunar month is a leap month."),
    luck: bool = typer.Option(False, "--luck", help="Include the Da Yun luck-pillar timeline."),
    year: Optional[int] = typer.Option(
        None, "--year", help="Show the luck and annual pillars active in this calendar year (implies --luck)."
    ),
    json_output: bool = typer.Option(False, "--json", help="Emit the chart as JSON."),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to a settings YAML file."),
) -> None:
    """Compute the Four Pillars chart for the supplied birth moment."""

    birth = _parse_moment(moment, lunar=lunar, leap_month=leap_month)
    try:
        settings = load_settings(config) if config is not None else default_settings()
    except (ValueError, yaml.YAMLError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc
    try:
        result = build_chart(birth, gender, include_luck=luck or year is not None, settings=settings)
    except ChartUnavailable as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc

    if json_output:
        typer.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return
    _echo_chart(result, year)


@app.command("init-config")
def cli_init_config() -> None:
    """Write the default settings file if missing and print its path."""

    typer.echo(str(ensure_default_config()))
