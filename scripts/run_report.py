# path: scripts/run_report.py
import os
import sys
import tempfile
import traceback

from clapeyron_beam.services.logging_setup import setup_logging
logger = setup_logging()

def _excepthook(exctype, value, tb):
    msg = "".join(traceback.format_exception(exctype, value, tb))
    logger.error("Excepción no capturada:\n%s", msg)
    sys.__excepthook__(exctype, value, tb)

sys.excepthook = _excepthook

from clapeyron_beam.domain.loads import LoadInput
from clapeyron_beam.engine.alphas import validate_alpha_results
from clapeyron_beam.engine.calculations import run_calculation
from clapeyron_beam.services.alpha_report_pdf import ReportHeader, export_alpha_report
from clapeyron_beam.services.load_set import LoadSet
from clapeyron_beam.view.renderer_moment import save_figures


def main(out_pdf: str = "memoria_alfas.pdf"):
    span = 6.0
    ls = LoadSet(span)
    ls.add(LoadInput(type="distributed", start=0.0, end=6.0, w1=10.0, w2=10.0))
    ls.add(LoadInput(type="point", position=3.0, magnitude=25.0))

    outcome = run_calculation(ls.loads, span)
    if not outcome.ok:
        logger.error("Cálculo fallido: %s", "; ".join(outcome.errors))
        return 1

    with tempfile.TemporaryDirectory() as td:
        imgs = save_figures(td, ls.loads, span, outcome.moment_points, outcome.alpha_results)
        export_alpha_report(
            out_pdf,
            header=ReportHeader(proyecto="Demo"),
            span_length=span,
            loads=ls.loads,
            results=outcome.alpha_results,
            symmetry=outcome.symmetry,
            validation=validate_alpha_results(outcome.alpha_results),
            imagenes=imgs,
        )

    logger.info("Memoria generada: %s", os.path.abspath(out_pdf))
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
