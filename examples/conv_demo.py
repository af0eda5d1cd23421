#!/usr/bin/env python3
"""
Convolution demo.

Reads a flat list of values from a text file (if present), then convolves a
(3, 16, 16) image volume holding 1..768 with a (2, 2, 2) kernel 0.1..0.8.

Usage:
  python examples/conv_demo.py --values values.txt --stride 1 --padding 0
"""

import argparse
import os
import numpy as np

from voltools import Volume, VolumeEngine
from voltools.io import read_values_from_file, print_volume, print_shape


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--values", default="values.txt", help="Comma or whitespace delimited floats to echo")
    ap.add_argument("--stride", type=int, default=1, help="Convolution stride")
    ap.add_argument("--padding", type=int, default=0, help="Zero padding on every side")
    ap.add_argument("--decimals", type=int, default=None, help="Decimals when printing (default %%f)")
    ap.add_argument("--no-numba", action="store_true", help="Use the NumPy / SciPy cores")
    ap.add_argument("--debug", action="store_true", help="Print engine diagnostics")
    args = ap.parse_args()

    if os.path.exists(args.values):
        values = read_values_from_file(args.values)
        print(f"Read {values.size} values:")
        print(" ".join(f"{v:.2f}" for v in values))

    engine = VolumeEngine(use_numba=not args.no_numba, debug=args.debug)

    img = Volume.from_values(np.arange(1, 16 * 16 * 3 + 1), 3, 16, 16)
    kernel = Volume.from_values([0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8], 2, 2, 2)

    result = engine.convolve(img, kernel, stride=args.stride, padding=args.padding)
    if not result.ok:
        print(f"Convolution failed: {result.error}")
        return 1

    print_shape(result.volume)
    print_volume(result.volume, decimals=args.decimals)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
