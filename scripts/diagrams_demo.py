from clapeyron_beam.domain.loads import PointLoad, DistributedLoad, MomentLoad
from clapeyron_beam.engine.moments import generate_moment_points, find_max_moment, moment_at, total_reactions

L = 10.0

loads = [
    PointLoad(id="P1", position=2.0, magnitude=20.0),                     # kN, down+
    DistributedLoad(id="q1", start=0.0, end=10.0, w1=5.0, w2=5.0),        # kN/m
    DistributedLoad(id="q2", start=4.0, end=8.0, w1=0.0, w2=12.0),        # triangular
    MomentLoad(id="M1", position=8.0, magnitude=15.0),                    # kN·m
]

points = generate_moment_points(loads, L, 200)
mm = find_max_moment(points)
r = total_reactions(loads, L)

print("R1 =", r.r1, "R2 =", r.r2)
print("M(0) =", moment_at(loads, 0.0, L))
print("M(5) =", moment_at(loads, 5.0, L))
print("M(L) =", moment_at(loads, L, L))
print("|M|max =", mm.max_moment, "en x =", mm.max_moment_position)
