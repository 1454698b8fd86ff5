"""matplotlib charts comparing word usage across years and parties."""
from __future__ import annotations

from pathlib import Path
from typing import List, Mapping, Optional, Sequence
import logging

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
import pandas as pd  # noqa: E402

from .frames import party_keyword_rates, since_year, with_party  # noqa: E402

LOGGER = logging.getLogger(__name__)

PARTY_COLORS = {"Democrat": "#2171b5", "Republican": "#cb181d"}
_DEFAULT_COLOR = "#737373"


def plot_words_per_speech(frame: pd.DataFrame, ax: plt.Axes) -> None:
    ordered = frame.sort_values("year")
    ax.plot(ordered["year"], ordered["number_of_words"], marker="o", markersize=3, linewidth=1.0, color="#2171b5")
    ax.set_title("Words per annual message", fontsize=11)
    ax.set_xlabel("Year")
    ax.set_ylabel("Words")
    ax.grid(axis="y", alpha=0.2)


def plot_phrase_by_year(frame: pd.DataFrame, label: str, ax: plt.Axes) -> None:
    per_year = frame.groupby("year")[label].sum()
    ax.bar(per_year.index, per_year.values, color="#6a51a3", width=0.8)
    ax.set_title(f"'{label}' per year", fontsize=11)
    ax.set_xlabel("Year")
    ax.set_ylabel("Occurrences")
    ax.grid(axis="y", alpha=0.2)


def plot_reactions(frame: pd.DataFrame, ax: plt.Axes) -> None:
    per_year = frame.groupby("year")[["applause_count", "laughter_count"]].sum()
    ax.plot(per_year.index, per_year["applause_count"], marker="s", markersize=3, linewidth=1.0, label="Applause")
    ax.plot(per_year.index, per_year["laughter_count"], marker="o", markersize=3, linewidth=1.0, label="Laughter")
    ax.set_title("Audience reactions", fontsize=11)
    ax.set_xlabel("Year")
    ax.set_ylabel("Annotations")
    ax.legend(fontsize=8, loc="upper left", framealpha=0.9)
    ax.grid(axis="y", alpha=0.2)


def plot_party_rates(rates: pd.DataFrame, ax: plt.Axes) -> None:
    """Grouped bars of keyword uses per 1,000 words, one group per keyword."""

    labels = list(rates.columns)
    parties = list(rates.index)
    width = 0.8 / max(1, len(parties))
    for offset, party in enumerate(parties):
        positions = [index + offset * width for index in range(len(labels))]
        ax.bar(
            positions,
            rates.loc[party].values,
            width=width,
            label=party,
            color=PARTY_COLORS.get(party, _DEFAULT_COLOR),
        )
    ax.set_xticks([index + 0.4 - width / 2 for index in range(len(labels))])
    ax.set_xticklabels(labels, rotation=30, ha="right", fontsize=9)
    ax.set_ylabel("Uses per 1,000 words")
    ax.set_title("Keyword usage by party", fontsize=11)
    ax.legend(fontsize=8, framealpha=0.9)
    ax.grid(axis="y", alpha=0.2)


def _save(fig: plt.Figure, path: Path) -> Path:
    fig.tight_layout()
    fig.savefig(path, dpi=150, bbox_inches="tight", facecolor="white")
    plt.close(fig)
    LOGGER.info("Saved %s", path)
    return path


def render_charts(
    frame: pd.DataFrame,
    output_dir: Path,
    *,
    year_threshold: int,
    affiliation: Mapping[str, str],
    labels: Sequence[str],
    phrase_label: Optional[str] = "god_bless",
) -> List[Path]:
    """Render all charts for ``frame`` into ``output_dir`` and return the files."""

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    written: List[Path] = []

    fig, ax = plt.subplots(figsize=(10, 4))
    plot_words_per_speech(frame, ax)
    written.append(_save(fig, output_dir / "words_per_speech.png"))

    if phrase_label and phrase_label in frame.columns:
        fig, ax = plt.subplots(figsize=(10, 4))
        plot_phrase_by_year(frame, phrase_label, ax)
        written.append(_save(fig, output_dir / f"{phrase_label}_by_year.png"))

    modern = since_year(frame, year_threshold)
    if modern.empty:
        LOGGER.warning("No speeches after %s; skipping reaction and party charts", year_threshold)
        return written

    fig, ax = plt.subplots(figsize=(10, 4))
    plot_reactions(modern, ax)
    written.append(_save(fig, output_dir / "reactions_by_year.png"))

    rates = party_keyword_rates(with_party(modern, affiliation), labels)
    if rates.empty:
        LOGGER.warning("No speeches with a known party after %s; skipping party chart", year_threshold)
        return written
    fig, ax = plt.subplots(figsize=(10, 4))
    plot_party_rates(rates, ax)
    written.append(_save(fig, output_dir / "keywords_by_party.png"))
    return written


__all__ = [
    "plot_party_rates",
    "plot_phrase_by_year",
    "plot_reactions",
    "plot_words_per_speech",
    "render_charts",
]
