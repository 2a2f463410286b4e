"""
Built-in gesture templates.

Each entry is a name and a flat [x, y, stroke_id, ...] coordinate list in
screen pixels, exactly as the samples would arrive from a drawing surface.
"""
from functools import lru_cache
from typing import Tuple

from .pointcloud import PointCloud


DEFAULT_TEMPLATES: Tuple[Tuple[str, Tuple[int, ...]], ...] = (
    ("X", (
        30, 146, 1, 106, 222, 1,
        30, 225, 2, 106, 146, 2,
    )),
    ("line", (
        12, 347, 1, 119, 347, 1,
    )),
    ("asterisk", (
        325, 499, 1, 417, 557, 1,
        417, 499, 2, 325, 557, 2,
        371, 486, 3, 371, 571, 3,
    )),
    ("circle", (
        382, 310, 1, 377, 308, 1, 373, 307, 1, 366, 307, 1, 360, 310, 1, 356, 313, 1,
        353, 316, 1, 349, 321, 1, 347, 326, 1, 344, 331, 1, 342, 337, 1, 341, 343, 1,
        341, 350, 1, 341, 358, 1, 342, 362, 1, 344, 366, 1, 347, 370, 1, 351, 374, 1,
        356, 379, 1, 361, 382, 1, 368, 385, 1, 374, 387, 1, 381, 387, 1, 390, 387, 1,
        397, 385, 1, 404, 382, 1, 408, 378, 1, 412, 373, 1, 416, 367, 1, 418, 361, 1,
        419, 353, 1, 418, 346, 1, 417, 341, 1, 416, 336, 1, 413, 331, 1, 410, 326, 1,
        404, 320, 1, 400, 317, 1, 393, 313, 1, 392, 312, 1,
    )),
    ("rectangle", (
        188, 137, 1, 188, 225, 1,
        188, 137, 2, 241, 137, 2,
        241, 137, 3, 241, 225, 3,
        188, 225, 4, 241, 225, 4,
    )),
    ("horizontal-ellipse", (
        382, 330, 1, 375, 328, 1, 368, 327, 1, 358, 327, 1, 348, 330, 1, 340, 333, 1,
        335, 336, 1, 328, 341, 1, 324, 346, 1, 319, 351, 1, 315, 357, 1, 313, 363, 1,
        313, 370, 1, 313, 378, 1, 315, 382, 1, 319, 386, 1, 324, 390, 1, 331, 394, 1,
        340, 399, 1, 349, 402, 1, 368, 405, 1, 384, 407, 1, 401, 407, 1, 420, 407, 1,
        437, 405, 1, 454, 402, 1, 468, 398, 1, 482, 393, 1, 496, 387, 1, 508, 381, 1,
        519, 373, 1, 528, 366, 1, 537, 361, 1, 546, 356, 1, 553, 351, 1, 560, 346, 1,
        564, 340, 1, 568, 337, 1, 573, 333, 1, 582, 312, 1,
    )),
    ("vertical-ellipse", (
        382, 290, 1, 379, 288, 1, 376, 287, 1, 371, 287, 1, 366, 290, 1, 362, 293, 1,
        359, 296, 1, 355, 301, 1, 353, 306, 1, 350, 311, 1, 348, 317, 1, 347, 323, 1,
        347, 330, 1, 347, 338, 1, 348, 342, 1, 350, 346, 1, 353, 350, 1, 357, 354, 1,
        362, 359, 1, 367, 362, 1, 374, 365, 1, 380, 367, 1, 387, 367, 1, 396, 367, 1,
        403, 365, 1, 410, 362, 1, 414, 358, 1, 418, 353, 1, 422, 347, 1, 424, 341, 1,
        425, 333, 1, 424, 326, 1, 423, 321, 1, 422, 316, 1, 419, 311, 1, 416, 306, 1,
        410, 300, 1, 406, 297, 1, 399, 293, 1, 398, 292, 1,
    )),
    # 7:1
    ("flat-horizontal-ellipse", (
        100, 347, 1, 120, 345, 1, 140, 344, 1, 160, 343, 1, 180, 342, 1, 200, 341, 1,
        220, 340, 1, 240, 339, 1, 260, 338, 1, 280, 338, 1, 300, 337, 1, 320, 337, 1,
        340, 337, 1, 360, 337, 1, 380, 337, 1, 400, 337, 1, 420, 337, 1, 440, 337, 1,
        460, 337, 1, 480, 338, 1, 500, 338, 1, 520, 339, 1, 540, 340, 1, 560, 341, 1,
        580, 342, 1, 600, 343, 1, 620, 344, 1, 640, 345, 1, 660, 347, 1, 640, 349, 1,
        620, 350, 1, 600, 351, 1, 580, 352, 1, 560, 353, 1, 540, 354, 1, 520, 355, 1,
        500, 356, 1, 480, 356, 1, 460, 357, 1, 440, 357, 1, 420, 357, 1, 400, 357, 1,
        380, 357, 1, 360, 357, 1, 340, 357, 1, 320, 357, 1, 300, 357, 1, 280, 356, 1,
        260, 356, 1, 240, 355, 1, 220, 354, 1, 200, 353, 1, 180, 352, 1, 160, 351, 1,
        140, 350, 1, 120, 349, 1,
    )),
    ("flat-vertical-ellipse", (
        380, 67, 1, 378, 87, 1, 377, 107, 1, 376, 127, 1, 375, 147, 1, 374, 167, 1,
        373, 187, 1, 372, 207, 1, 371, 227, 1, 371, 247, 1, 370, 267, 1, 370, 287, 1,
        370, 307, 1, 370, 327, 1, 370, 347, 1, 370, 367, 1, 370, 387, 1, 370, 407, 1,
        370, 427, 1, 371, 447, 1, 371, 467, 1, 372, 487, 1, 373, 507, 1, 374, 527, 1,
        375, 547, 1, 376, 567, 1, 377, 587, 1, 378, 607, 1, 380, 627, 1, 382, 607, 1,
        383, 587, 1, 384, 567, 1, 385, 547, 1, 386, 527, 1, 387, 507, 1, 388, 487, 1,
        389, 467, 1, 389, 447, 1, 390, 427, 1, 390, 407, 1, 390, 387, 1, 390, 367, 1,
        390, 347, 1, 390, 327, 1, 390, 307, 1, 390, 287, 1, 390, 267, 1, 389, 247, 1,
        389, 227, 1, 388, 207, 1, 387, 187, 1, 386, 167, 1, 385, 147, 1, 384, 127, 1,
        383, 107, 1, 382, 87, 1,
    )),
    # 15:1
    ("ultra-flat-horizontal-ellipse", (
        100, 347, 1, 130, 342, 1, 160, 338, 1, 190, 335, 1, 220, 333, 1, 250, 331, 1,
        280, 329, 1, 310, 328, 1, 340, 327, 1, 370, 326, 1, 400, 326, 1, 430, 326, 1,
        460, 326, 1, 490, 326, 1, 520, 326, 1, 550, 326, 1, 580, 326, 1, 610, 326, 1,
        640, 327, 1, 670, 328, 1, 700, 329, 1, 730, 331, 1, 760, 333, 1, 790, 335, 1,
        820, 338, 1, 850, 342, 1, 880, 347, 1, 850, 352, 1, 820, 356, 1, 790, 359, 1,
        760, 361, 1, 730, 363, 1, 700, 365, 1, 670, 366, 1, 640, 367, 1, 610, 368, 1,
        580, 368, 1, 550, 368, 1, 520, 368, 1, 490, 368, 1, 460, 368, 1, 430, 368, 1,
        400, 368, 1, 370, 368, 1, 340, 367, 1, 310, 366, 1, 280, 365, 1, 250, 363, 1,
        220, 361, 1, 190, 359, 1, 160, 356, 1, 130, 352, 1,
    )),
    ("ultra-flat-vertical-ellipse", (
        380, 70, 1, 374, 100, 1, 369, 130, 1, 365, 160, 1, 362, 190, 1, 360, 220, 1,
        359, 250, 1, 358, 280, 1, 358, 310, 1, 358, 340, 1, 358, 370, 1, 358, 400, 1,
        358, 430, 1, 358, 460, 1, 358, 490, 1, 358, 520, 1, 358, 550, 1, 358, 580, 1,
        358, 610, 1, 358, 640, 1, 358, 670, 1, 358, 700, 1, 359, 730, 1, 360, 760, 1,
        362, 790, 1, 365, 820, 1, 369, 850, 1, 374, 880, 1, 380, 910, 1, 386, 880, 1,
        391, 850, 1, 395, 820, 1, 398, 790, 1, 400, 760, 1, 401, 730, 1, 402, 700, 1,
        402, 670, 1, 402, 640, 1, 402, 610, 1, 402, 580, 1, 402, 550, 1, 402, 520, 1,
        402, 490, 1, 402, 460, 1, 402, 430, 1, 402, 400, 1, 402, 370, 1, 402, 340, 1,
        402, 310, 1, 401, 280, 1, 400, 250, 1, 398, 220, 1, 395, 190, 1, 391, 160, 1,
        386, 130, 1, 374, 100, 1,
    )),
    ("vertical-line", (
        60, 12, 1, 60, 119, 1,
    )),
    ("right-slant", (
        12, 119, 1, 119, 12, 1,
    )),
    ("left-slant", (
        12, 12, 1, 119, 119, 1,
    )),
    # +15 degrees from horizontal
    ("slight-right-slant", (
        12, 347, 1, 115, 319, 1,
    )),
    ("slight-left-slant", (
        12, 347, 1, 115, 375, 1,
    )),
)

DEFAULT_COUNT = len(DEFAULT_TEMPLATES)


@lru_cache(maxsize=1)
def default_clouds() -> Tuple[PointCloud, ...]:
    """Point clouds for every built-in template, in order. Built once per process."""
    return tuple(PointCloud.from_coordinates(name, coords) for name, coords in DEFAULT_TEMPLATES)
