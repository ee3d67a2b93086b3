# core/vector.py
import math

class Vector3:
    """
    A 3-component real vector used for points, directions and linear colors.
    Every operation returns a new vector; instances are never mutated in place.
    """
    def __init__(self, x: float, y: float, z: float):
        self.x = x
        self.y = y
        self.z = z

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return Vector3(self.x * other, self.y * other, self.z * other)
        # Component-wise product, used to apply a color attenuation.
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def __rmul__(self, other: float) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Vector3":
        return Vector3(self.x / t, self.y / t, self.z / t)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize(self) -> "Vector3":
        return self / self.length()

    def near_zero(self, epsilon: float = 1e-8) -> bool:
        """
        True when every component is smaller than epsilon in magnitude.
        """
        return abs(self.x) < epsilon and abs(self.y) < epsilon and abs(self.z) < epsilon

    def lerp(self, other: "Vector3", t: float) -> "Vector3":
        """
        Linear interpolation from self (t=0) towards other (t=1).
        """
        return Vector3(self.x + (other.x - self.x) * t,
                       self.y + (other.y - self.y) * t,
                       self.z + (other.z - self.z) * t)

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"


# Linear RGB colors share the vector arithmetic.
Color = Vector3
