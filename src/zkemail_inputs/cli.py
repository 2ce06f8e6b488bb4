from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from .config import CircuitConfig
from .dkim import DkimResult, inputs_from_dkim
from .inputs import CircuitVariant
from .utils import dump_json, load_json


app = typer.Typer(help="Circuit input generator for DKIM-signed email proofs.")


@app.command("init-config")
def init_config(
    out: Path = typer.Option(
        Path("circuit_config.json"),
        "--out",
        "-o",
        help="Path where the circuit configuration JSON will be written.",
    ),
) -> None:
    """Write the default circuit geometry."""
    cfg = CircuitConfig()
    cfg.dump(out)
    typer.echo(f"[config] wrote circuit config to {out}")


@app.command()
def generate(
    dkim: Path = typer.Option(..., "--dkim", "-d", help="DKIM result JSON (signature, signed_header, public_key)."),
    output_dir: Path = typer.Option(..., "--output-dir", "-o", help="Where to write input_<variant>.json."),
    variant: CircuitVariant = typer.Option(CircuitVariant.SHA, "--variant", "-v", help="Circuit to encode inputs for."),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Circuit config JSON; defaults are used if omitted."),
) -> None:
    """Encode a verified DKIM signature as circuit inputs."""
    try:
        cfg = CircuitConfig.load(config) if config else CircuitConfig()
        result = DkimResult.from_dict(load_json(dkim))
        bundle = inputs_from_dkim(result, variant, cfg)
    except (ValueError, FileNotFoundError) as exc:
        typer.echo(f"[inputs] {exc}", err=True)
        raise typer.Exit(code=1)
    out_path = output_dir / f"input_{variant.value}.json"
    dump_json(out_path, bundle.to_dict())
    typer.echo(f"[inputs] wrote {variant.value} circuit inputs to {out_path}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
