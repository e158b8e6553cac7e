"""Small 1D demonstration of the interpolation entry point."""

# When executed as a script ``__package__`` is ``None``.  Use an absolute
# import so that the module can be run both as ``python -m mlinterp.driver``
# and ``python mlinterp/driver.py``.
import numpy as np

from mlinterp.interpolation import interp


def main() -> None:
    xd = np.array([-1.0, 0.0, 1.0])
    yd = np.array([1.0, 0.0, 1.0])
    xi = np.linspace(-1.0, 1.0, 9)
    yi = np.empty_like(xi)
    interp([xd.shape[0]], xi.shape[0], yd, yi, [(xd, xi)])
    for x, y in zip(xi, yi):
        print(f"{x:6.2f} {y:6.3f}")


if __name__ == "__main__":
    main()
