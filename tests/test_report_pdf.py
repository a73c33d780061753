# path: tests/test_report_pdf.py
import logging
import os
import tempfile
from datetime import datetime

from simple_beam.domain.beam import Beam
from simple_beam.domain.loads import DistributedLoad, MomentLoad, PointLoad
from simple_beam.domain.supports import Support
from simple_beam.engine.analysis import run_analysis
from simple_beam.services.logging_setup import setup_logging
from simple_beam.services.report_pdf import ReportHeader, export_analysis_pdf
from simple_beam.view.renderer_diagrams import save_diagram_images


def _result():
    beam = Beam(
        length=8.0,
        loads=(
            PointLoad(3.0, 2000.0, label="P1"),
            DistributedLoad(0.0, 8.0, 500.0),
            MomentLoad(6.0, 800.0, label="M1"),
        ),
        supports=(Support(0.0), Support(8.0)),
    )
    return beam, run_analysis(beam)


def test_save_diagram_images_writes_pngs():
    _, result = _result()
    with tempfile.TemporaryDirectory() as td:
        imgs = save_diagram_images(result, td)
        assert set(imgs) == {"shear", "moment", "deflection"}
        for path in imgs.values():
            assert os.path.exists(path)
            assert os.path.getsize(path) > 0


def test_export_analysis_pdf_creates_file():
    beam, result = _result()
    with tempfile.TemporaryDirectory() as td:
        imgs = save_diagram_images(result, td)
        out = os.path.join(td, "memoria.pdf")
        header = ReportHeader(title="Test Memoria", author="QA", date=datetime(2024, 1, 2, 3, 4))

        export_analysis_pdf(out, header, beam, result, images=imgs)
        assert os.path.exists(out)
        assert os.path.getsize(out) > 0


def test_export_analysis_pdf_without_images():
    beam, result = _result()
    with tempfile.TemporaryDirectory() as td:
        out = os.path.join(td, "memoria.pdf")
        export_analysis_pdf(out, ReportHeader(title="Sin figuras"), beam, result, images={"shear": "/no/existe.png"})
        assert os.path.getsize(out) > 0


def test_setup_logging_is_idempotent():
    with tempfile.TemporaryDirectory() as td:
        logger = setup_logging(log_dir=td, log_name="test.log")
        try:
            again = setup_logging(log_dir=td, log_name="test.log", level=logging.DEBUG)
            assert again is logger
            assert len(logger.handlers) == 2
            assert logger.level == logging.DEBUG
            assert all(h.level == logging.DEBUG for h in logger.handlers)
            logger.info("hola")
            assert os.path.exists(os.path.join(td, "test.log"))
        finally:
            for h in list(logger.handlers):
                logger.removeHandler(h)
                h.close()
            logger.setLevel(logging.NOTSET)
