from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class Material:
    """
    Material elástico lineal (SI).

    Solo elastic_modulus entra al cálculo (E en EI); densidad y fluencia
    quedan para trazabilidad / catálogo.
    """
    id: str
    name: str = ""
    elastic_modulus: float = 0.0      # Pa
    density: float = 0.0              # kg/m^3
    yield_strength: Optional[float] = None  # Pa

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "elasticModulus": self.elastic_modulus,
            "density": self.density,
            "yieldStrength": self.yield_strength,
        }


class MaterialDB:
    def __init__(self, materials: List[Material]):
        self.materials: List[Material] = list(materials)
        self.by_id: Dict[str, Material] = {m.id.strip(): m for m in self.materials if m.id.strip()}

    @classmethod
    def default(cls) -> "MaterialDB":
        """Presets del archivo incluido en el paquete, en el orden del archivo."""
        return cls.from_txt(default_materials_path(), sort=False)

    def ids(self) -> List[str]:
        return [m.id for m in self.materials]

    def get(self, mat_id: str) -> Optional[Material]:
        return self.by_id.get((mat_id or "").strip())

    def to_list(self) -> List[Dict[str, Any]]:
        return [m.to_dict() for m in self.materials]

    @staticmethod
    def _norm(s: str) -> str:
        return (s or "").strip()

    @classmethod
    def from_txt(cls, path: str | Path, sort: bool = True) -> "MaterialDB":
        """
        Archivo de texto separado por ';' con encabezado:
          id;name;elastic_modulus;density;yield_strength
        Líneas vacías y comentarios (# o //) se ignoran. Acepta coma decimal.
        Con sort=True los materiales quedan ordenados por id.
        """
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(f"No existe el archivo de materiales: {p}")

        lines = p.read_text(encoding="utf-8", errors="replace").splitlines()
        rows: List[List[str]] = []
        for ln in lines:
            t = ln.strip()
            if not t:
                continue
            if t.startswith("#") or t.startswith("//"):
                continue
            rows.append([c.strip() for c in t.split(";")])

        if not rows:
            raise ValueError("Archivo de materiales vacío o sin filas válidas.")

        header = [h.strip().lower() for h in rows[0]]
        if "id" not in header or "elastic_modulus" not in header:
            raise ValueError("Archivo de materiales sin encabezado (se requieren columnas id y elastic_modulus).")

        def idx(name: str) -> Optional[int]:
            return header.index(name) if name in header else None

        i_id = idx("id")
        i_name = idx("name")
        i_E = idx("elastic_modulus")
        i_rho = idx("density")
        i_fy = idx("yield_strength")

        def get_cell(row: List[str], i: Optional[int]) -> str:
            if i is None:
                return ""
            return row[i] if i < len(row) else ""

        def try_float(s: str) -> Optional[float]:
            t = (s or "").strip().replace(",", ".")
            if t == "":
                return None
            try:
                return float(t)
            except ValueError:
                return None

        mats: List[Material] = []
        for r in rows[1:]:
            mid = cls._norm(get_cell(r, i_id))
            if not mid:
                continue

            E = try_float(get_cell(r, i_E))
            if E is None or E <= 0:
                # sin E el material no sirve para el cálculo
                continue

            mats.append(Material(
                id=mid,
                name=cls._norm(get_cell(r, i_name)) or mid,
                elastic_modulus=float(E),
                density=try_float(get_cell(r, i_rho)) or 0.0,
                yield_strength=try_float(get_cell(r, i_fy)),
            ))

        if not mats:
            raise ValueError("No se pudieron cargar materiales: faltan valores de elastic_modulus.")

        if sort:
            mats.sort(key=lambda m: m.id.upper())
        return cls(mats)


def default_materials_path() -> Path:
    """
    Ruta por defecto dentro del paquete:
      src/simple_beam/data/materials.txt
    """
    here = Path(__file__).resolve()
    return here.parents[1] / "data" / "materials.txt"
