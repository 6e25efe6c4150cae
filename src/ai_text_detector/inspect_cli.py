from __future__ import annotations

import json
from pathlib import Path

import click

from .config import load_config
from .errors import DetectionError
from .features import extract
from .scoring import FEATURE_RULES, aggregate, sub_scores
from .tokenization import tokenize


@click.group(name="inspect")
def inspect_group() -> None:
    """Inspect feature values and the scoring rule table."""


@inspect_group.command("features")
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--config", "config_path", type=click.Path(exists=True), default=None)
@click.option("--json-output", type=click.Path(), default=None)
def inspect_features(input_file: str, config_path: str | None, json_output: str | None) -> None:
    """Print the feature vector, sub-scores and weights for a text file."""
    try:
        cfg = load_config(config_path)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--config") from exc
    text = Path(input_file).read_text(encoding="utf-8")
    stream = tokenize(text)
    try:
        features = extract(
            stream,
            min_sentences=cfg.min_sentences,
            min_words=cfg.min_words,
            repetition_window=cfg.repetition_window,
        )
    except DetectionError as exc:
        raise click.ClickException(str(exc)) from exc
    scores = sub_scores(features)
    verdict = aggregate(features)

    click.echo(f"File: {input_file}")
    click.echo(f"Sentences: {stream.sentence_count}")
    click.echo(f"Words: {stream.word_count}")
    for rule in FEATURE_RULES:
        click.echo(
            f"{rule.feature:<26} value={getattr(features, rule.feature):>9.4f} "
            f"sub={scores[rule.feature]:.4f} weight={rule.weight:.2f}"
        )
    click.echo(f"Score: {verdict.score:.4f} (AI generated: {verdict.is_ai_generated})")

    if json_output is not None:
        payload = {
            "file": input_file,
            "num_sentences": stream.sentence_count,
            "num_words": stream.word_count,
            "features": features.to_dict(),
            "sub_scores": scores,
            "score": verdict.score,
            "confidence": verdict.confidence,
            "is_ai_generated": verdict.is_ai_generated,
        }
        json_path = Path(json_output)
        json_path.parent.mkdir(parents=True, exist_ok=True)
        json_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        click.echo(f"Wrote detailed JSON to {json_output}")


@inspect_group.command("rules")
def inspect_rules() -> None:
    """Print the normalization rule table."""
    for rule in FEATURE_RULES:
        click.echo(
            f"{rule.feature:<26} ai-when={rule.direction:<6} midpoint={rule.midpoint:<6g} "
            f"steepness={rule.steepness:<6g} weight={rule.weight:.2f} curve={rule.curve}"
        )


def main() -> None:
    inspect_group()


if __name__ == "__main__":
    main()
