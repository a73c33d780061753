# path: src/simple_beam/services/api.py
from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Tuple

from simple_beam.domain.errors import (
    UnsupportedConfigurationError, UnsupportedSectionError, ValidationError
)
from simple_beam.engine.analysis import analyze_beam
from simple_beam.materials.material_db import MaterialDB
from simple_beam.sections.catalog import presets_as_dicts
from simple_beam.sections.properties import parse_section, section_properties

# Nota: este módulo NO depende de ningún framework web. Cada handler recibe el
# cuerpo ya decodificado (dict) y devuelve (status_http, payload_json).

logger = logging.getLogger(__name__)

Response = Tuple[int, Any]

REQUIRED_FIELDS = ("beamLength", "loads", "supports")


def _missing_fields(body: Mapping[str, Any]) -> list:
    out = []
    for k in REQUIRED_FIELDS:
        v = body.get(k)
        if v is None or v == "" or v == 0 or (isinstance(v, (list, tuple)) and not v):
            out.append(k)
    return out


def handle_analyze_request(body: Any) -> Response:
    if not isinstance(body, Mapping):
        logger.warning("Pedido rechazado: cuerpo no es un objeto (%s).", type(body).__name__)
        return 400, {"error": "Datos incompletos. Indique largo de la viga, cargas y apoyos."}

    missing = _missing_fields(body)
    if missing:
        logger.warning("Pedido rechazado: faltan campos %s.", missing)
        return 400, {
            "error": "Datos incompletos. Indique largo de la viga, cargas y apoyos.",
            "missing": missing,
        }

    try:
        result = analyze_beam(body)
    except (ValidationError, UnsupportedConfigurationError) as e:
        logger.warning("Pedido rechazado: %s", e)
        return 400, {"error": "Datos de la viga inválidos", "details": str(e)}
    except Exception as e:
        logger.exception("Error en el cálculo de la viga")
        return 500, {"error": "Error al procesar el cálculo de la viga", "details": str(e)}

    return 200, result


def handle_materials_request(db: Optional[MaterialDB] = None) -> Response:
    db = db or MaterialDB.default()
    return 200, db.to_list()


def handle_sections_request() -> Response:
    return 200, presets_as_dicts()


def handle_section_properties_request(body: Any) -> Response:
    if not isinstance(body, Mapping):
        return 400, {"error": "Se esperaba un objeto con la sección."}
    try:
        props = section_properties(parse_section(body))
    except (UnsupportedSectionError, ValidationError) as e:
        logger.warning("Sección rechazada: %s", e)
        return 400, {"error": "Sección inválida", "details": str(e)}
    except Exception as e:
        logger.exception("Error en el cálculo de propiedades de sección")
        return 500, {"error": "Error al calcular la sección", "details": str(e)}

    out: Dict[str, Any] = props.to_dict()
    return 200, out
