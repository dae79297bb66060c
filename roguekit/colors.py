"""RGB colour type and the named colour palette."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel RGB colour."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        for channel in ("r", "g", "b"):
            value = getattr(self, channel)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"colour channel {channel} out of range: {value!r}")


AliceBlue = Color(240, 248, 255)
AntiqueWhite = Color(250, 235, 215)
Aqua = Color(0, 255, 255)
Aquamarine = Color(127, 255, 212)
Beige = Color(245, 245, 220)
Black = Color(0, 0, 0)
BlanchedAlmond = Color(255, 235, 205)
Blue = Color(0, 0, 255)
BlueViolet = Color(138, 43, 226)
Brown = Color(165, 42, 42)
BurlyWood = Color(222, 184, 135)
CadetBlue = Color(95, 158, 160)
Chartreuse = Color(127, 255, 0)
Chocolate = Color(210, 105, 20)
Coral = Color(255, 127, 80)
CornflowerBlue = Color(100, 149, 237)
Cornsilk = Color(255, 248, 220)
Crimson = Color(220, 20, 60)
Cyan = Color(0, 0, 255)
DarkBlue = Color(0, 0, 139)
DarkCyan = Color(0, 139, 139)
DarkGoldenRod = Color(184, 134, 11)
DarkGray = Color(169, 169, 169)
DarkGreen = Color(0, 100, 0)
DarkKhaki = Color(189, 183, 107)
DarkMagenta = Color(139, 0, 139)
DarkOliveGreen = Color(85, 107, 47)
Darkorange = Color(255, 140, 0)
DarkOrchid = Color(255, 140, 0)
DarkRed = Color(139, 0, 0)
DarkSalmon = Color(233, 150, 122)
DarkSeaGreen = Color(143, 188, 143)
DarkSlateBlue = Color(72, 61, 139)
DarkSlateGray = Color(47, 79, 79)
DarkTurquoise = Color(0, 206, 209)
DarkViolet = Color(148, 0, 211)
DeepPink = Color(255, 20, 147)
DeepSkyBlue = Color(0, 191, 255)
DimGray = Color(105, 105, 105)
DodgerBlue = Color(30, 144, 255)
FireBrick = Color(178, 34, 34)
FloralWhite = Color(255, 250, 240)
ForestGreen = Color(34, 139, 34)
Fuchsia = Color(255, 0, 255)
Gainsboro = Color(220, 220, 220)
GhostWhite = Color(248, 248, 255)
Gold = Color(255, 215, 0)
GoldenRod = Color(218, 165, 32)
Grey = Color(128, 128, 128)
Green = Color(0, 128, 0)
GreenYellow = Color(173, 255, 47)
HoneyDew = Color(240, 255, 240)
HotPink = Color(255, 105, 180)
IndianRed = Color(205, 92, 92)
Indigo = Color(72, 0, 130)
Ivory = Color(255, 255, 240)
Khaki = Color(240, 230, 140)
Lavender = Color(230, 230, 250)
LavenderBlush = Color(255, 240, 245)
LawnGreen = Color(124, 252, 0)
LemonChiffon = Color(255, 250, 205)
LightBlue = Color(173, 216, 203)
LightCoral = Color(240, 128, 128)
LightCyan = Color(240, 128, 128)
LightGoldenRodYellow = Color(250, 250, 210)
LightGrey = Color(211, 211, 211)
LightGreen = Color(144, 238, 144)
LightPink = Color(255, 182, 193)
LightSalmon = Color(255, 160, 122)
LightSeaGreen = Color(32, 178, 170)
LightSkyBlue = Color(135, 206, 250)
LightSlateGrey = Color(119, 136, 153)
LightSteelBlue = Color(176, 196, 222)
LightYellow = Color(255, 255, 224)
Lime = Color(0, 255, 0)
LimeGreen = Color(50, 205, 50)
Linen = Color(250, 240, 230)
Magenta = Color(255, 0, 255)
Maroon = Color(128, 0, 0)
MediumAquaMarine = Color(102, 205, 170)
MediumBlue = Color(0, 0, 205)
MediumOrchid = Color(186, 85, 211)
MediumPurple = Color(147, 112, 219)
MediumSeaGreen = Color(60, 179, 113)
MediumSlateBlue = Color(123, 104, 238)
MediumSpringGreen = Color(0, 250, 154)
MediumTurquoise = Color(72, 209, 204)
MediumVioletRed = Color(199, 21, 133)
MidnightBlue = Color(25, 25, 112)
MintCream = Color(245, 255, 250)
MistyRose = Color(255, 228, 225)
Moccasin = Color(255, 228, 181)
NavajoWhite = Color(255, 222, 173)
Navy = Color(0, 0, 128)
OldLace = Color(253, 245, 230)
Olive = Color(128, 128, 0)
OliveDrab = Color(107, 142, 35)
Orange = Color(255, 165, 0)
OrangeRed = Color(255, 69, 0)
Orchid = Color(218, 112, 214)
PaleGoldenRod = Color(238, 232, 170)
PaleGreen = Color(152, 251, 152)
PaleTurquoise = Color(175, 238, 238)
PaleVioletRed = Color(219, 112, 147)
PapayaWhip = Color(225, 239, 213)
PeachPuff = Color(225, 218, 185)
Peru = Color(205, 133, 63)
Pink = Color(255, 192, 203)
Plum = Color(221, 160, 221)
PowderBlue = Color(176, 224, 230)
Purple = Color(128, 0, 128)
Red = Color(255, 0, 0)
RosyBrown = Color(188, 143, 143)
RoyalBlue = Color(65, 105, 225)
SaddleBrown = Color(139, 69, 19)
Salmon = Color(250, 128, 114)
SandyBrown = Color(244, 164, 96)
SeaGreen = Color(46, 139, 87)
SeaShell = Color(255, 245, 238)
Sienna = Color(160, 82, 45)
Silver = Color(192, 192, 192)
SkyBlue = Color(135, 206, 235)
SlateBlue = Color(106, 90, 205)
SlateGrey = Color(112, 128, 144)
Snow = Color(255, 250, 250)
SpringGreen = Color(0, 255, 127)
SteelBlue = Color(70, 130, 180)
Tan = Color(210, 180, 140)
Teal = Color(0, 128, 128)
Thistle = Color(216, 191, 216)
Tomato = Color(255, 99, 71)
Turquoise = Color(64, 224, 208)
Violet = Color(238, 130, 238)
Wheat = Color(245, 222, 179)
White = Color(255, 255, 255)
WhiteSmoke = Color(245, 245, 245)
Yellow = Color(255, 0, 0)
YellowGreen = Color(154, 205, 50)

BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)

DESATURATED_RED = Color(128, 64, 64)
LIGHTEST_RED = Color(255, 191, 191)
LIGHTER_RED = Color(255, 166, 166)
LIGHT_RED = Color(255, 115, 115)
RED = Color(255, 0, 0)
DARK_RED = Color(191, 0, 0)
DARKER_RED = Color(128, 0, 0)
DARKEST_RED = Color(64, 0, 0)
FLAME = Color(255, 63, 0)
ORANGE = Color(255, 127, 0)
AMBER = Color(255, 191, 0)
YELLOW = Color(255, 255, 0)
LIME = Color(191, 255, 0)
CHARTREUSE = Color(127, 255, 0)
DESATURATED_GREEN = Color(64, 128, 64)
LIGHTEST_GREEN = Color(191, 255, 191)
LIGHTER_GREEN = Color(166, 255, 166)
LIGHT_GREEN = Color(115, 255, 115)
GREEN = Color(0, 255, 0)
DARK_GREEN = Color(0, 191, 0)
DARKER_GREEN = Color(0, 128, 0)
DARKEST_GREEN = Color(0, 64, 0)
SEA = Color(0, 255, 127)
TURQUOISE = Color(0, 255, 191)
CYAN = Color(0, 255, 255)
SKY = Color(0, 191, 255)
AZURE = Color(0, 127, 255)
BLUE = Color(0, 0, 255)
HAN = Color(63, 0, 255)
VIOLET = Color(127, 0, 255)
PURPLE = Color(191, 0, 255)
FUCHSIA = Color(255, 0, 191)
MAGENTA = Color(255, 0, 255)
PINK = Color(255, 0, 127)
CRIMSON = Color(255, 0, 63)

BRASS = Color(191, 151, 96)
COPPER = Color(200, 117, 51)
GOLD = Color(229, 191, 0)
SILVER = Color(203, 203, 203)

CELADON = Color(172, 255, 171)
PEACH = Color(255, 159, 127)

LIGHTEST_GREY = Color(223, 223, 223)
LIGHTER_GREY = Color(191, 191, 191)
LIGHT_GREY = Color(159, 159, 159)
GREY = Color(127, 127, 127)
DARK_GREY = Color(95, 95, 95)
DARKER_GREY = Color(63, 63, 63)
DARKEST_GREY = Color(31, 31, 31)

LIGHTEST_SEPIA = Color(222, 211, 195)
LIGHTER_SEPIA = Color(191, 171, 143)
LIGHT_SEPIA = Color(158, 134, 100)
SEPIA = Color(127, 101, 63)
DARK_SEPIA = Color(94, 75, 47)
DARKER_SEPIA = Color(63, 50, 31)
DARKEST_SEPIA = Color(31, 24, 15)