"""Linear Kalman filter used to track RSSI and its rate of change."""

from typing import Optional

import numpy as np


class KalmanFilter:
    """
    Textbook linear Kalman filter.

    Attributes:
        F: State transition model
        Q: Process noise covariance
        H: Observation model
        R: Observation noise covariance
        P: Estimate covariance
        x: State estimate (column vector); None until seeded
    """

    def __init__(self) -> None:
        self.F: Optional[np.ndarray] = None
        self.Q: Optional[np.ndarray] = None
        self.H: Optional[np.ndarray] = None
        self.R: Optional[np.ndarray] = None
        self.P: Optional[np.ndarray] = None
        self.x: Optional[np.ndarray] = None

    def predict(self) -> None:
        self.x = self.F @ self.x
        self.P = self.F @ self.P @ self.F.T + self.Q

    def update(self, z: np.ndarray) -> None:
        y = z - self.H @ self.x
        s = self.H @ self.P @ self.H.T + self.R
        k = self.P @ self.H.T @ np.linalg.inv(s)
        self.x = self.x + k @ y
        self.P = self.P - k @ self.H @ self.P

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(x={None if self.x is None else self.x.ravel().tolist()})"
