# path: scripts/export_report.py
import os
import sys
import traceback

THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT = os.path.abspath(os.path.join(THIS_DIR, ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from simple_beam.services.logging_setup import setup_logging
logger = setup_logging()


def _excepthook(exctype, value, tb):
    msg = "".join(traceback.format_exception(exctype, value, tb))
    logger.error("Excepción no capturada:\n%s", msg)
    sys.__excepthook__(exctype, value, tb)


sys.excepthook = _excepthook

from simple_beam.domain.beam import Beam
from simple_beam.domain.loads import PointLoad, DistributedLoad
from simple_beam.domain.supports import Support
from simple_beam.engine.analysis import run_analysis
from simple_beam.services.report_pdf import ReportHeader, export_analysis_pdf
from simple_beam.view.renderer_diagrams import save_diagram_images


def main(out_dir: str = "out"):
    beam = Beam(
        length=10.0,
        loads=(
            PointLoad(position=5.0, value=1000.0, label="P1"),
            DistributedLoad(position=0.0, length=10.0, value=100.0, label="q"),
        ),
        supports=(Support(0.0), Support(10.0)),
    )
    result = run_analysis(beam)
    imgs = save_diagram_images(result, out_dir)
    pdf = os.path.join(out_dir, "memoria.pdf")
    export_analysis_pdf(pdf, ReportHeader(title="Viga simplemente apoyada"), beam, result, images=imgs)
    logger.info("Memoria exportada: %s", pdf)


if __name__ == "__main__":
    main(*sys.argv[1:2])
