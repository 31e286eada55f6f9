# path: tests/test_validation.py
import math

import pytest

from clapeyron_beam.domain.loads import DistributedLoad, LoadInput, PointLoad
from clapeyron_beam.engine.validation import (
    suggest_load_corrections,
    validate_load,
    validate_load_set,
    validate_span,
)


def test_missing_type():
    res = validate_load(LoadInput(type=None, position=1.0, magnitude=1.0), 10.0)
    assert not res.is_valid
    assert res.errors == ["El tipo de carga es requerido"]


def test_unknown_type():
    res = validate_load(LoadInput(type="axial"), 10.0)
    assert not res.is_valid
    assert "Tipo de carga no válido" in res.errors


def test_point_load_ok():
    res = validate_load(LoadInput(type="point", position=3.0, magnitude=10.0), 10.0)
    assert res.is_valid
    assert res.errors == []
    assert res.warnings == []


def test_zero_values_are_present_not_missing():
    # 0.0 es un dato, no un campo vacío
    res = validate_load(LoadInput(type="point", position=0.0, magnitude=10.0), 10.0)
    assert res.is_valid
    assert "La posición es requerida para cargas puntuales" not in res.errors
    assert "Carga aplicada en el apoyo: puede generar reacciones concentradas" in res.warnings

    res = validate_load(LoadInput(type="point", position=4.0, magnitude=0.0), 10.0)
    assert res.is_valid
    assert "La magnitud de la carga es muy pequeña" in res.warnings

    res = validate_load(LoadInput(type="moment", moment_position=0.0, moment_magnitude=5.0), 10.0)
    assert res.is_valid
    assert any("Momento aplicado en el apoyo" in w for w in res.warnings)


def test_point_load_missing_fields():
    res = validate_load(LoadInput(type="point"), 10.0)
    assert not res.is_valid
    assert "La posición es requerida para cargas puntuales" in res.errors
    assert "La magnitud es requerida para cargas puntuales" in res.errors


@pytest.mark.parametrize("position", [-0.5, 10.5])
def test_point_load_out_of_span(position):
    res = validate_load(LoadInput(type="point", position=position, magnitude=10.0), 10.0)
    assert not res.is_valid
    assert len(res.errors) == 1


def test_point_load_magnitude_warnings():
    res = validate_load(LoadInput(type="point", position=3.0, magnitude=0.05), 10.0)
    assert res.is_valid
    assert any("Magnitud muy pequeña" in w for w in res.warnings)

    res = validate_load(LoadInput(type="point", position=3.0, magnitude=1500.0), 10.0)
    assert res.is_valid
    assert any("Magnitud muy alta" in w for w in res.warnings)
    assert "Relación carga/longitud muy alta para aplicaciones típicas" in res.warnings


def test_distributed_load_inverted_range():
    res = validate_load(LoadInput(type="distributed", start=5.0, end=2.0, w1=3.0, w2=3.0), 10.0)
    assert not res.is_valid
    assert "La posición final debe ser mayor que la inicial" in res.errors


def test_distributed_load_missing_fields():
    res = validate_load(LoadInput(type="distributed", start=0.0), 10.0)
    assert not res.is_valid
    assert "La posición final es requerida para cargas distribuidas" in res.errors
    assert "La intensidad inicial (w1) es requerida" in res.errors
    assert "La intensidad final (w2) es requerida" in res.errors
    assert "La posición inicial es requerida para cargas distribuidas" not in res.errors


def test_distributed_load_out_of_span():
    res = validate_load(LoadInput(type="distributed", start=-1.0, end=11.0, w1=3.0, w2=3.0), 10.0)
    assert not res.is_valid
    assert "La posición inicial no puede ser negativa" in res.errors
    assert any("La posición final no puede exceder" in e for e in res.errors)


def test_distributed_load_warnings():
    res = validate_load(LoadInput(type="distributed", start=0.0, end=10.0, w1=3.0, w2=3.0), 10.0)
    assert res.is_valid
    assert "La carga distribuida cubre casi todo el tramo" in res.warnings

    res = validate_load(LoadInput(type="distributed", start=2.0, end=2.05, w1=3.0, w2=3.0), 10.0)
    assert res.is_valid
    assert "La longitud de la carga distribuida es muy pequeña" in res.warnings

    res = validate_load(LoadInput(type="distributed", start=1.0, end=3.0, w1=0.0, w2=0.0), 10.0)
    assert "Ambas intensidades son muy pequeñas" in res.warnings

    res = validate_load(LoadInput(type="distributed", start=1.0, end=3.0, w1=150.0, w2=150.0), 10.0)
    assert "Intensidad de carga muy alta: verifique las unidades" in res.warnings
    assert "Carga total muy alta: verifique si las unidades son correctas" in res.warnings


def test_distributed_overlap_warning():
    existing = [DistributedLoad(id="q", start=2.0, end=5.0, w1=3.0, w2=3.0)]
    res = validate_load(LoadInput(type="distributed", start=4.0, end=6.0, w1=1.0, w2=1.0), 10.0, existing)
    assert res.is_valid
    assert "La carga distribuida se superpone con cargas existentes" in res.warnings

    # tocarse en un extremo no es superponerse
    res = validate_load(LoadInput(type="distributed", start=5.0, end=7.0, w1=1.0, w2=1.0), 10.0, existing)
    assert "La carga distribuida se superpone con cargas existentes" not in res.warnings


def test_nearby_point_loads_warning():
    existing = [PointLoad(id="p", position=4.0, magnitude=10.0)]
    res = validate_load(LoadInput(type="point", position=4.3, magnitude=5.0), 10.0, existing)
    assert "Hay cargas puntuales muy cercanas: considere combinarlas" in res.warnings

    res = validate_load(LoadInput(type="point", position=6.0, magnitude=5.0), 10.0, existing)
    assert "Hay cargas puntuales muy cercanas: considere combinarlas" not in res.warnings


def test_many_loads_warning():
    existing = [PointLoad(id=f"p{i}", position=float(i) * 0.9, magnitude=1.0) for i in range(11)]
    res = validate_load(LoadInput(type="moment", moment_position=5.0, moment_magnitude=1.0), 10.0, existing)
    assert "Muchas cargas aplicadas: considere simplificar el modelo" in res.warnings


def test_precision_warning():
    res = validate_load(LoadInput(type="point", position=3.1234, magnitude=10.0), 10.0)
    assert res.is_valid
    assert "Posición tiene demasiados decimales: considere redondear" in res.warnings

    res = validate_load(LoadInput(type="point", position=3.125, magnitude=10.0), 10.0)
    assert "Posición tiene demasiados decimales: considere redondear" not in res.warnings


def test_moment_load_validation():
    res = validate_load(LoadInput(type="moment", moment_position=3.0), 10.0)
    assert not res.is_valid
    assert "La magnitud es requerida para momentos aplicados" in res.errors

    res = validate_load(LoadInput(type="moment", moment_position=3.0, moment_magnitude=2000.0), 10.0)
    assert res.is_valid
    assert "Magnitud de momento muy alta: verifique los valores" in res.warnings

    # los campos de carga puntual no sirven para momentos
    res = validate_load(LoadInput(type="moment", position=3.0, magnitude=5.0), 10.0)
    assert "La posición es requerida para momentos aplicados" in res.errors


def test_load_set_empty():
    res = validate_load_set([], 10.0)
    assert res.is_valid
    assert res.warnings == ["No hay cargas aplicadas"]


def test_load_set_symmetric_hint():
    loads = [
        PointLoad(id="a", position=2.0, magnitude=30.0),
        PointLoad(id="b", position=8.0, magnitude=30.0),
    ]
    res = validate_load_set(loads, 10.0)
    assert res.is_valid
    assert "Las cargas parecen aproximadamente simétricas" in res.warnings


def test_load_set_asymmetric_and_heavy():
    loads = [
        PointLoad(id="a", position=0.5, magnitude=900.0),
        DistributedLoad(id="q", start=0.0, end=2.0, w1=100.0, w2=100.0),
    ]
    res = validate_load_set(loads, 10.0)
    assert "Carga total muy alta: verifique las unidades y magnitudes" in res.warnings
    assert "Las cargas parecen aproximadamente simétricas" not in res.warnings


def test_load_set_zero_total():
    loads = [PointLoad(id="a", position=2.0, magnitude=0.0)]
    res = validate_load_set(loads, 10.0)
    assert "La carga total es cero: verifique las magnitudes" in res.warnings


def test_validate_span():
    assert validate_span(None).errors == ["La longitud del tramo es requerida"]
    assert validate_span(0.0).errors == ["La longitud del tramo debe ser positiva"]
    assert validate_span(-3.0).errors == ["La longitud del tramo debe ser positiva"]

    res = validate_span(0.05)
    assert not res.is_valid
    assert "Tramo muy corto: los resultados pueden no ser representativos" in res.warnings

    res = validate_span(600.0)
    assert not res.is_valid
    assert "Tramo muy largo: considere subdividir en varios tramos" in res.warnings

    res = validate_span(6.0)
    assert res.is_valid
    assert res.warnings == []


def test_suggest_load_corrections():
    assert suggest_load_corrections(LoadInput(type="point", position=-1.0, magnitude=1.0), 10.0) == [
        "Cambiar la posición a un valor entre 0 y 10"
    ]
    assert suggest_load_corrections(LoadInput(type="point", position=12.0, magnitude=1.0), 10.0) == [
        "Reducir la posición a máximo 10 m"
    ]
    out = suggest_load_corrections(LoadInput(type="distributed", start=8.0, end=12.0, w1=1.0, w2=1.0), 10.0)
    assert out == ["Ajustar la posición final a máximo 10 m"]

    out = suggest_load_corrections(LoadInput(type="moment", moment_position=11.0, moment_magnitude=1.0), 10.0)
    assert out == ["Ajustar la posición entre 0 y 10 m"]

    assert suggest_load_corrections(LoadInput(type="point", position=4.0, magnitude=1.0), 10.0) == []


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_point_load_non_finite_is_an_error(bad):
    res = validate_load(LoadInput(type="point", position=bad, magnitude=10.0), 10.0)
    assert not res.is_valid
    assert res.errors == ["La posición debe ser un número finito"]

    res = validate_load(LoadInput(type="point", position=3.0, magnitude=bad), 10.0)
    assert not res.is_valid
    assert res.errors == ["La magnitud debe ser un número finito"]


def test_distributed_load_non_finite_is_an_error():
    res = validate_load(LoadInput(type="distributed", start=math.nan, end=4.0, w1=2.0, w2=2.0), 10.0)
    assert not res.is_valid
    assert res.errors == ["La posición inicial debe ser un número finito"]

    res = validate_load(LoadInput(type="distributed", start=1.0, end=math.inf, w1=2.0, w2=2.0), 10.0)
    assert res.errors == ["La posición final debe ser un número finito"]

    res = validate_load(LoadInput(type="distributed", start=1.0, end=4.0, w1=2.0, w2=math.nan), 10.0)
    assert res.errors == ["La intensidad final (w2) debe ser un número finito"]


def test_moment_load_non_finite_is_an_error():
    res = validate_load(LoadInput(type="moment", moment_position=math.nan, moment_magnitude=5.0), 10.0)
    assert not res.is_valid
    assert res.errors == ["La posición debe ser un número finito"]

    res = validate_load(LoadInput(type="moment", moment_position=3.0, moment_magnitude=-math.inf), 10.0)
    assert res.errors == ["La magnitud debe ser un número finito"]


def test_non_finite_values_do_not_break_neighbour_checks():
    existing = [
        PointLoad(id="p", position=4.0, magnitude=10.0),
        DistributedLoad(id="q", start=2.0, end=5.0, w1=3.0, w2=3.0),
    ]
    res = validate_load(LoadInput(type="point", position=math.nan, magnitude=10.0), 10.0, existing)
    assert not res.is_valid
    res = validate_load(LoadInput(type="distributed", start=math.nan, end=4.0, w1=1.0, w2=1.0), 10.0, existing)
    assert not res.is_valid


@pytest.mark.parametrize("bad", [math.nan, math.inf])
def test_validate_span_non_finite(bad):
    res = validate_span(bad)
    assert not res.is_valid
    assert res.errors == ["La longitud del tramo debe ser un número finito"]


def test_moment_position_precision_warning():
    res = validate_load(LoadInput(type="moment", moment_position=3.1234, moment_magnitude=5.0), 10.0)
    assert res.is_valid
    assert "Posición del momento tiene demasiados decimales: considere redondear" in res.warnings

    res = validate_load(LoadInput(type="moment", moment_position=3.125, moment_magnitude=5.0), 10.0)
    assert not any("demasiados decimales" in w for w in res.warnings)
