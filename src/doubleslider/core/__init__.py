"""Host-facing slider object and the gesture replay tool."""

from doubleslider.core.slider import DoubleSlider


__all__ = ["DoubleSlider"]
