from simple_beam.engine.analysis import analyze_beam
from simple_beam.sections.properties import section_properties
from simple_beam.sections.shapes import IBeamSection

# Perfil I 200 mm -> I para el motor
props = section_properties(IBeamSection(height=0.2, width=0.1, web_thickness=0.008, flange_thickness=0.012))

job = {
    "beamLength": 6.0,
    "loads": [
        {"type": "point", "position": 2.0, "value": 10_000, "label": "P1"},     # N, down+
        {"type": "distributed", "position": 0.0, "length": 6.0, "value": 2_000},  # N/m, down+
        {"type": "moment", "position": 4.5, "value": 3_000, "label": "M1"},     # N·m, horario+
    ],
    "supports": [
        {"position": 0.0, "type": "simple"},
        {"position": 6.0, "type": "simple"},
    ],
    "elasticModulus": 210e9,
    "momentOfInertia": props.moment_of_inertia,
    "numPoints": 120,
}

out = analyze_beam(job)
res = out["results"]
for r in res["reactions"]:
    print(f"R @ x={r['position']:g} m = {r['value']:.2f} N")
print("ΣR =", res["sumForces"])
print("|V|max =", res["maxima"]["shear"])
print("|M|max =", res["maxima"]["moment"])
print("|δ|max =", res["maxima"]["deflection"])
print("cargas =", res["loadSummary"])
