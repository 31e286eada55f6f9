from clapeyron_beam.domain.loads import PointLoad, MomentLoad
from clapeyron_beam.engine.alphas import calculate_alphas, calculate_alpha_analytical, validate_alpha_results
from clapeyron_beam.engine.symmetry import analyze_load_symmetry, suggest_symmetry_improvements

L = 10.0

loads = [
    PointLoad(id="P1", position=2.0, magnitude=20.0),
    MomentLoad(id="M1", position=8.0, magnitude=15.0),
]

num = calculate_alphas(loads, L, 1000)
ana = calculate_alpha_analytical(loads, L)
sym = analyze_load_symmetry(loads, L)

print("numérico:  α1 =", num.alpha1, " α2 =", num.alpha2, " A =", num.area)
print("analítico: α1 =", ana.alpha1, " α2 =", ana.alpha2, " A =", ana.area)
print("simetría:", sym.symmetry_type, f"({sym.confidence:.2f})")
print("\n".join(sym.details))
print("\n".join(validate_alpha_results(num).warnings))
print("\n".join(suggest_symmetry_improvements(loads, L)))
