from __future__ import annotations

import math
import numbers
from typing import Any, Mapping, Sequence

from simple_beam.domain.beam import (
    Beam, DEFAULT_ELASTIC_MODULUS, DEFAULT_MOMENT_OF_INERTIA, DEFAULT_NUM_POINTS
)
from simple_beam.domain.errors import ValidationError
from simple_beam.domain.loads import PointLoad, DistributedLoad, MomentLoad, Load, LOAD_TYPES
from simple_beam.domain.supports import Support, SupportKind


def _num(d: Mapping[str, Any], key: str, what: str) -> float:
    if key not in d or d[key] is None:
        raise ValidationError(f'{what}: falta el campo "{key}".')
    v = d[key]
    if isinstance(v, bool):
        raise ValidationError(f'{what}: "{key}" debe ser numérico (valor={v!r}).')
    try:
        x = float(v)
    except (TypeError, ValueError):
        raise ValidationError(f'{what}: "{key}" debe ser numérico (valor={v!r}).') from None
    if not math.isfinite(x):
        raise ValidationError(f'{what}: "{key}" debe ser un número finito (valor={v!r}).')
    return x


def _num_or_default(d: Mapping[str, Any], key: str, default: float, what: str) -> float:
    if d.get(key) is None:
        return float(default)
    return _num(d, key, what)


def _num_points(d: Mapping[str, Any]) -> Any:
    v = d.get("numPoints")
    if v is None:
        return DEFAULT_NUM_POINTS
    # 100.0 -> 100; el resto lo rechaza la validación
    if isinstance(v, numbers.Real) and not isinstance(v, bool) and float(v).is_integer():
        return int(v)
    return v


def _items(d: Mapping[str, Any], key: str, what: str) -> Sequence[Any]:
    v = d.get(key)
    if v is None:
        return []
    if not isinstance(v, (list, tuple)):
        raise ValidationError(f'{what}: "{key}" debe ser una lista, llegó {type(v).__name__}.')
    return v


def _label(d: Mapping[str, Any]) -> str:
    return str(d.get("label") or d.get("id") or "").strip()


def parse_load(d: Mapping[str, Any], k: int) -> Load:
    if not isinstance(d, Mapping):
        raise ValidationError(f"Carga #{k}: se esperaba un objeto, llegó {type(d).__name__}.")
    kind = str(d.get("type") or "").strip().lower()
    cls = LOAD_TYPES.get(kind)
    if cls is None:
        raise ValidationError(f"Tipo de carga inválido (#{k}): {d.get('type')!r}")

    what = f"Carga #{k} ({kind})"
    position = _num(d, "position", what)
    value = _num(d, "value", what)
    if cls is DistributedLoad:
        return DistributedLoad(position=position, length=_num(d, "length", what), value=value, label=_label(d))
    if cls is PointLoad:
        return PointLoad(position=position, value=value, label=_label(d))
    return MomentLoad(position=position, value=value, label=_label(d))


def parse_support(d: Mapping[str, Any], k: int) -> Support:
    if not isinstance(d, Mapping):
        raise ValidationError(f"Apoyo #{k}: se esperaba un objeto, llegó {type(d).__name__}.")
    raw = str(d.get("type") or SupportKind.SIMPLE.value).strip().lower()
    try:
        kind = SupportKind(raw)
    except ValueError:
        raise ValidationError(f"Tipo de apoyo inválido (#{k}): {d.get('type')!r}") from None
    return Support(position=_num(d, "position", f"Apoyo #{k}"), kind=kind, label=_label(d))


def parse_job(job: Mapping[str, Any]) -> Beam:
    """
    Convierte el pedido (claves camelCase, como llega del cliente) a una Beam inmutable.

    Campos:
      beamLength (obligatorio), loads[], supports[],
      elasticModulus (210e9), momentOfInertia (1e-6), numPoints (100)
    """
    if not isinstance(job, Mapping):
        raise ValidationError(f"Pedido inválido: se esperaba un objeto, llegó {type(job).__name__}.")

    length = _num(job, "beamLength", "Viga")

    raw_loads = _items(job, "loads", "Cargas")
    raw_supports = _items(job, "supports", "Apoyos")

    loads = [parse_load(d, k) for k, d in enumerate(raw_loads, start=1)]
    supports = [parse_support(d, k) for k, d in enumerate(raw_supports, start=1)]

    return Beam(
        length=length,
        loads=tuple(loads),
        supports=tuple(supports),
        elastic_modulus=_num_or_default(job, "elasticModulus", DEFAULT_ELASTIC_MODULUS, "Material"),
        moment_of_inertia=_num_or_default(job, "momentOfInertia", DEFAULT_MOMENT_OF_INERTIA, "Sección"),
        num_points=_num_points(job),
    )
