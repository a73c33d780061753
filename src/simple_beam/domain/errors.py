from __future__ import annotations


class BeamAnalysisError(ValueError):
    """Error base del motor de cálculo (datos no resolubles, no fallas transitorias)."""


class ValidationError(BeamAnalysisError):
    """Datos geométricos o de cargas/apoyos inconsistentes. Se detecta antes de calcular."""


class UnsupportedConfigurationError(BeamAnalysisError):
    """Conjunto de apoyos sin solución cerrada (solo dos apoyos simples)."""


class UnsupportedSectionError(BeamAnalysisError):
    """Forma de sección transversal desconocida."""
