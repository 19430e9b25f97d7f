"""RGBA colours with conversions between the RGB, HLS, HSV, CMY and CMYK models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return min(max(float(value), low), high)


def _hue_to_channel(p: float, q: float, t: float) -> float:
    t %= 1.0
    if t < 1.0 / 6.0:
        return p + (q - p) * 6.0 * t
    if t < 1.0 / 2.0:
        return q
    if t < 2.0 / 3.0:
        return p + (q - p) * (2.0 / 3.0 - t) * 6.0
    return p


def _hue_of(r: float, g: float, b: float, high: float, delta: float) -> float:
    if high == r:
        sector = (g - b) / delta
    elif high == g:
        sector = 2.0 + (b - r) / delta
    else:
        sector = 4.0 + (r - g) / delta
    return (sector / 6.0) % 1.0


@dataclass
class Color:
    """A colour with red, green, blue and alpha channels, each in [0, 1]."""

    r: float = 1.0
    g: float = 1.0
    b: float = 1.0
    a: float = 1.0

    def __post_init__(self) -> None:
        self.r = _clamp(self.r)
        self.g = _clamp(self.g)
        self.b = _clamp(self.b)
        self.a = _clamp(self.a)

    # construction -------------------------------------------------------

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float, a: float = 1.0) -> "Color":
        """Build a colour from channels in [0, 1]; values outside are clamped."""
        return cls(r, g, b, a)

    @classmethod
    def from_unsigned_rgb(cls, r: int, g: int, b: int, a: float = 1.0) -> "Color":
        """Build a colour from 8-bit channels in [0, 255]."""
        r, g, b = (min(max(int(c), 0), 255) for c in (r, g, b))
        return cls(r / 255.0, g / 255.0, b / 255.0, a)

    @classmethod
    def from_hls(cls, h: float, l: float, s: float, a: float = 1.0) -> "Color":
        """Build a colour from hue (wrapping), lightness and saturation."""
        h = float(h) % 1.0
        l, s, a = _clamp(l), _clamp(s), _clamp(a)
        if s == 0.0:
            return cls(l, l, l, a)
        q = l * (1.0 + s) if l < 0.5 else (l + s) - l * s
        p = 2.0 * l - q
        return cls(
            _hue_to_channel(p, q, h + 1.0 / 3.0),
            _hue_to_channel(p, q, h),
            _hue_to_channel(p, q, h - 1.0 / 3.0),
            a,
        )

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float, a: float = 1.0) -> "Color":
        """Build a colour from hue (wrapping), saturation and value."""
        h = float(h) % 1.0
        s, v, a = _clamp(s), _clamp(v), _clamp(a)
        if s == 0.0:
            return cls(v, v, v, a)
        scaled = h * 6.0
        sector = int(scaled)
        f = scaled - sector
        p = v * (1.0 - s)
        q = v * (1.0 - s * f)
        t = v * (1.0 - s * (1.0 - f))
        channels = {
            0: (v, t, p),
            1: (q, v, p),
            2: (p, v, t),
            3: (p, q, v),
            4: (t, p, v),
        }.get(sector % 6, (v, p, q))
        return cls(*channels, a)

    @classmethod
    def from_luminance(cls, l: float, a: float = 1.0) -> "Color":
        """Build a gray of the given lightness."""
        return cls.from_hls(0.0, l, 0.0, a)

    @classmethod
    def from_cmy(cls, c: float, m: float, y: float, a: float = 1.0) -> "Color":
        """Build a colour from cyan, magenta and yellow."""
        c, m, y = _clamp(c), _clamp(m), _clamp(y)
        return cls(1.0 - c, 1.0 - m, 1.0 - y, a)

    @classmethod
    def from_cmyk(
        cls, c: float, m: float, y: float, k: float, a: float = 1.0
    ) -> "Color":
        """Build a colour from cyan, magenta, yellow and key (black)."""
        c, m, y, k = _clamp(c), _clamp(m), _clamp(y), _clamp(k)
        return cls(
            1.0 - (c * (1.0 - k) + k),
            1.0 - (m * (1.0 - k) + k),
            1.0 - (y * (1.0 - k) + k),
            a,
        )

    @classmethod
    def parse(cls, text: str) -> "Color":
        """Read four RGBA numbers, separated by spaces or commas, optionally in parentheses."""
        cleaned = text.strip().strip("()").replace(",", " ")
        values = [float(part) for part in cleaned.split()]
        if len(values) != 4:
            raise ValueError(f"expected four colour components, got {len(values)}")
        return cls(*values)

    # named colours ------------------------------------------------------

    @classmethod
    def black(cls) -> "Color":
        return cls.from_unsigned_rgb(0x00, 0x00, 0x00)

    @classmethod
    def gray(cls) -> "Color":
        return cls.from_unsigned_rgb(0x80, 0x80, 0x80)

    @classmethod
    def silver(cls) -> "Color":
        return cls.from_unsigned_rgb(0xC0, 0xC0, 0xC0)

    @classmethod
    def white(cls) -> "Color":
        return cls.from_unsigned_rgb(0xFF, 0xFF, 0xFF)

    @classmethod
    def red(cls) -> "Color":
        return cls.from_unsigned_rgb(0xFF, 0x00, 0x00)

    @classmethod
    def red_orange(cls) -> "Color":
        """Vermillion."""
        return cls.from_unsigned_rgb(0xE3, 0x42, 0x34)

    @classmethod
    def orange(cls) -> "Color":
        return cls.from_unsigned_rgb(0xFF, 0x7F, 0x00)

    @classmethod
    def yellow_orange(cls) -> "Color":
        """Amber."""
        return cls.from_unsigned_rgb(0xFF, 0xBF, 0x00)

    @classmethod
    def yellow(cls) -> "Color":
        return cls.from_unsigned_rgb(0xFF, 0xFF, 0x00)

    @classmethod
    def yellow_green(cls) -> "Color":
        """Chartreuse."""
        return cls.from_unsigned_rgb(0x7F, 0xFF, 0x00)

    @classmethod
    def green(cls) -> "Color":
        return cls.from_unsigned_rgb(0x00, 0xFF, 0x00)

    @classmethod
    def blue_green(cls) -> "Color":
        """Aquamarine."""
        return cls.from_unsigned_rgb(0x7F, 0xFF, 0xD4)

    @classmethod
    def blue(cls) -> "Color":
        return cls.from_unsigned_rgb(0x00, 0x00, 0xFF)

    @classmethod
    def blue_purple(cls) -> "Color":
        """Indigo."""
        return cls.from_unsigned_rgb(0x4B, 0x00, 0x82)

    @classmethod
    def purple(cls) -> "Color":
        return cls.from_unsigned_rgb(0x80, 0x00, 0x80)

    @classmethod
    def red_purple(cls) -> "Color":
        """Magenta."""
        return cls.from_unsigned_rgb(0xFF, 0x00, 0xFF)

    # adjustments --------------------------------------------------------

    def _assign(self, other: "Color") -> "Color":
        self.r, self.g, self.b, self.a = other.rgba()
        return self

    def shift_cw(self, value: float) -> "Color":
        """Rotate the hue clockwise (towards lower hue)."""
        h, l, s, a = self.hls()
        return self._assign(type(self).from_hls(h - value, l, s, a))

    def shift_ccw(self, value: float) -> "Color":
        """Rotate the hue counter-clockwise (towards higher hue)."""
        h, l, s, a = self.hls()
        return self._assign(type(self).from_hls(h + value, l, s, a))

    def darken(self, value: float) -> "Color":
        h, l, s, a = self.hls()
        return self._assign(type(self).from_hls(h, l - value, s, a))

    def lighten(self, value: float) -> "Color":
        h, l, s, a = self.hls()
        return self._assign(type(self).from_hls(h, l + value, s, a))

    def saturate(self, value: float) -> "Color":
        h, l, s, a = self.hls()
        return self._assign(type(self).from_hls(h, l, s + value, a))

    def desaturate(self, value: float) -> "Color":
        h, l, s, a = self.hls()
        return self._assign(type(self).from_hls(h, l, s - value, a))

    def set_alpha(self, alpha: float) -> "Color":
        self.a = _clamp(alpha)
        return self

    # conversions --------------------------------------------------------

    def rgba(self) -> Tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)

    def hls(self) -> Tuple[float, float, float, float]:
        """Return (hue, lightness, saturation, alpha)."""
        high = max(self.r, self.g, self.b)
        low = min(self.r, self.g, self.b)
        lightness = (high + low) / 2.0
        if high == low:
            return (0.0, lightness, 0.0, self.a)
        delta = high - low
        if lightness > 0.5:
            saturation = delta / (2.0 - high - low)
        else:
            saturation = delta / (high + low)
        hue = _hue_of(self.r, self.g, self.b, high, delta)
        return (hue, lightness, saturation, self.a)

    def hsv(self) -> Tuple[float, float, float, float]:
        """Return (hue, saturation, value, alpha)."""
        high = max(self.r, self.g, self.b)
        low = min(self.r, self.g, self.b)
        if high == low:
            return (0.0, 0.0, high, self.a)
        delta = high - low
        hue = _hue_of(self.r, self.g, self.b, high, delta)
        return (hue, delta / high, high, self.a)

    def cmy(self) -> Tuple[float, float, float, float]:
        """Return (cyan, magenta, yellow, alpha)."""
        return (1.0 - self.r, 1.0 - self.g, 1.0 - self.b, self.a)

    def cmyk(self) -> Tuple[float, float, float, float, float]:
        """Return (cyan, magenta, yellow, key, alpha)."""
        c, m, y = 1.0 - self.r, 1.0 - self.g, 1.0 - self.b
        k = min(c, m, y, 1.0)
        if k == 1.0:
            return (0.0, 0.0, 0.0, k, self.a)
        scale = 1.0 - k
        return ((c - k) / scale, (m - k) / scale, (y - k) / scale, k, self.a)

    def __str__(self) -> str:
        return f"({self.r:g}, {self.g:g}, {self.b:g}, {self.a:g})"