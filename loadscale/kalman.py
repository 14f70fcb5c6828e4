"""Kalman filters used to smooth load-cell readings."""

from __future__ import annotations

from dataclasses import dataclass, field

Vector = tuple[float, float]
Matrix = tuple[Vector, Vector]


def _mat_vec(matrix: Matrix, vector: Vector) -> Vector:
    return tuple(sum(a * b for a, b in zip(row, vector)) for row in matrix)  # type: ignore[return-value]


def _transpose(matrix: Matrix) -> Matrix:
    return tuple(zip(*matrix))  # type: ignore[return-value]


def _mat_mul(left: Matrix, right: Matrix) -> Matrix:
    columns = _transpose(right)
    return tuple(  # type: ignore[return-value]
        tuple(sum(a * b for a, b in zip(row, column)) for column in columns) for row in left
    )


def _mat_add(left: Matrix, right: Matrix) -> Matrix:
    return tuple(  # type: ignore[return-value]
        tuple(a + b for a, b in zip(row_l, row_r)) for row_l, row_r in zip(left, right)
    )


@dataclass
class KalmanFilter2D:
    """Two-state (value, rate) Kalman filter with a scalar measurement.

    The defaults describe a constant-velocity model sampled every 0.25 ms.
    """

    phi: Matrix = ((1.0, 0.25e-3), (0.0, 1.0))
    q: Matrix = ((0.0, 0.0), (0.0, 1082.323))
    h: Vector = (1.0, 0.0)
    r: float = 0.04
    p: Matrix = ((0.04, 160.0), (160.0, 641082.323))
    x: Vector = (0.0, 0.0)

    def update(self, measurement: float) -> float:
        """Fold in one measurement and return the new value estimate."""
        x_minus = _mat_vec(self.phi, self.x)
        p_minus = _mat_add(_mat_mul(_mat_mul(self.phi, self.p), _transpose(self.phi)), self.q)

        h_p = _mat_vec(_transpose(p_minus), self.h)
        variance = sum(a * b for a, b in zip(h_p, self.h)) + self.r
        if variance == 0:
            raise ValueError("innovation variance is zero")
        gain = tuple(value / variance for value in _mat_vec(p_minus, self.h))

        correction: Matrix = tuple(  # type: ignore[assignment]
            tuple((1.0 if i == j else 0.0) - k * h for j, h in enumerate(self.h))
            for i, k in enumerate(gain)
        )
        self.p = _mat_mul(correction, p_minus)
        innovation = measurement - x_minus[0]
        self.x = tuple(xm + k * innovation for xm, k in zip(x_minus, gain))  # type: ignore[assignment]
        return self.x[0]


@dataclass
class ScalarKalmanFilter:
    """One-state Kalman filter for a quantity expected to stay constant."""

    q: float = 0.022
    r: float = 0.617
    estimate: float = 0.0
    error: float = 0.0
    gain: float = field(default=0.0, init=False)

    def update(self, measurement: float) -> float:
        """Fold in one measurement and return the new estimate."""
        predicted_error = self.error + self.q
        denominator = predicted_error + self.r
        if denominator == 0:
            raise ValueError("predicted error and measurement noise are both zero")
        self.gain = predicted_error / denominator
        self.estimate += self.gain * (measurement - self.estimate)
        self.error = (1.0 - self.gain) * predicted_error
        return self.estimate