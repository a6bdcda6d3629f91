#!/usr/bin/env python3
"""
ionmatch CLI - match peaks to theoretical ions and report mass errors.
"""

import logging
import sys

import click

from . import __version__
from .annotators import FragmentAnnotator, ReporterIonAnnotator
from .config import IonMatchConfig
from .ions import PrecursorIon, TMT_6PLEX
from .masses import peptide_mass as sequence_mass
from .matches import IonMatch, IonMatchKeysCache, match_errors
from .scoring import PrecursorAccuracy
from .spectrum import Precursor, SpectrumIndex

logger = logging.getLogger(__name__)


def setup_logging(debug):
    """Setup logging configuration"""
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    formatter = logging.Formatter(log_format)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if debug else logging.WARNING)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG if debug else logging.WARNING)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logging.getLogger("numpy").setLevel(logging.WARNING)


@click.group()
@click.version_option(version=__version__)
def cli():
    """
    ionmatch: peak to ion matching for proteomics mass spectrometry

    Available commands:
      precursor-score   precursor m/z accuracy of a peptide identification
      annotate          fragment and reporter ion annotation of peaks

    Examples:
      ionmatch precursor-score --sequence PEPTIDE --mz 400.6871 --charge 2
      ionmatch annotate --sequence PEPTIDE --charge 2 --peak 227.1026 1000
    """
    pass


@cli.command("precursor-score")
@click.option("--sequence", help="Peptide sequence in OpenMS notation")
@click.option("--peptide-mass", type=float, help="Neutral peptide mass, used if no sequence is given")
@click.option("--mz", type=float, required=True, help="Precursor m/z")
@click.option("--intensity", type=float, default=0.0, help="Precursor intensity (default: 0)")
@click.option("--charge", type=int, required=True, help="Charge of the identification")
@click.option(
    "--unit",
    type=click.Choice(["Da", "ppm"]),
    default=None,
    help="Error unit (default: from configuration, ppm)",
)
@click.option("--min-isotope", type=int, default=None, help="Minimal isotope (default: 0)")
@click.option("--max-isotope", type=int, default=None, help="Maximal isotope (default: 1)")
@click.option("--debug", is_flag=True, help="Enable debug output")
def precursor_score(sequence, peptide_mass, mz, intensity, charge, unit, min_isotope, max_isotope, debug):
    """Precursor m/z accuracy of a peptide identification."""
    setup_logging(debug)

    if sequence is None and peptide_mass is None:
        raise click.UsageError("Either --sequence or --peptide-mass is required")

    config = IonMatchConfig()
    if unit is not None:
        config["precursor_error_units"] = unit
    if min_isotope is not None:
        config["min_isotope"] = min_isotope
    if max_isotope is not None:
        config["max_isotope"] = max_isotope

    mass = sequence_mass(sequence) if sequence else peptide_mass
    ppm = config.is_precursor_ppm()
    min_iso = config["min_isotope"]
    max_iso = config["max_isotope"]
    logger.debug(f"Peptide mass {mass:.6f}, isotope range [{min_iso}, {max_iso}]")

    precursor = Precursor(mz, intensity, possible_charges=(charge,))
    ion_match = IonMatch(precursor.mz, precursor.intensity, PrecursorIon(mass), charge)
    score = PrecursorAccuracy().get_score(mass, charge, precursor, ppm, min_iso, max_iso)
    unit_label = "ppm" if ppm else "Da"

    click.echo(f"Theoretical m/z: {ion_match.ion.theoretic_mz(charge):.6f}")
    click.echo(f"Isotope: {ion_match.isotope_number(min_iso, max_iso)}")
    click.echo(f"Error: {ion_match.error(ppm, min_iso, max_iso):.6f} {unit_label}")
    click.echo(f"Score: {score:.6f}")


@cli.command()
@click.option("--sequence", required=True, help="Peptide sequence in OpenMS notation")
@click.option("--charge", type=int, default=2, help="Peptide charge (default: 2)")
@click.option(
    "--peak",
    "peaks",
    type=(float, float),
    multiple=True,
    required=True,
    help="Peak as MZ INTENSITY, repeatable",
)
@click.option(
    "--ion-series",
    type=click.Choice(["by", "cz", "ax"]),
    default="by",
    help="Fragment ion series (default: by)",
)
@click.option("--fragment-mass-tolerance", type=float, default=0.02, help="Fragment mass tolerance (default: 0.02)")
@click.option(
    "--fragment-error-units",
    type=click.Choice(["Da", "ppm"]),
    default="Da",
    help="Unit of fragment mass tolerance (default: Da)",
)
@click.option("--reporters", is_flag=True, help="Also annotate TMT 6-plex reporter ions")
@click.option("--html", is_flag=True, help="Print labels as HTML")
@click.option("--debug", is_flag=True, help="Enable debug output")
def annotate(sequence, charge, peaks, ion_series, fragment_mass_tolerance, fragment_error_units, reporters, html, debug):
    """Fragment and reporter ion annotation of peaks."""
    setup_logging(debug)

    config = IonMatchConfig(
        {
            "fragment_mass_tolerance": fragment_mass_tolerance,
            "fragment_error_units": fragment_error_units,
            "ion_series": ion_series,
        }
    )
    mz_values = [mz for mz, _ in peaks]
    intensities = [intensity for _, intensity in peaks]
    spectrum_index = SpectrumIndex.from_config(mz_values, intensities, config)

    matches = FragmentAnnotator(sequence, config["ion_series"]).get_ion_matches(spectrum_index, charge)
    if reporters:
        matches.extend(ReporterIonAnnotator(TMT_6PLEX).get_ion_matches(spectrum_index))

    if not matches:
        click.echo("No matches")
        return

    ppm = config.is_fragment_ppm()
    errors = match_errors(matches, ppm)
    keys_cache = IonMatchKeysCache()
    unit_label = "ppm" if ppm else "Da"

    for ion_match, error in zip(matches, errors):
        click.echo(
            "\t".join(
                [
                    ion_match.peak_annotation(html),
                    ion_match.match_key(keys_cache),
                    f"{ion_match.peak_mz:.4f}",
                    f"{ion_match.ion.theoretic_mz(ion_match.charge):.4f}",
                    f"{error:.4f}",
                ]
            )
        )
    click.echo(f"{len(matches)} matches, mean absolute error {abs(errors).mean():.4f} {unit_label}")


def main():
    """Main entry point for ionmatch CLI."""
    try:
        cli()
    except KeyboardInterrupt:
        click.echo("\nOperation cancelled by user")
        sys.exit(1)
    except Exception as e:
        click.echo(f"Error: {str(e)}")
        sys.exit(1)


if __name__ == "__main__":
    main()
