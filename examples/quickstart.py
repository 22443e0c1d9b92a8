#!/usr/bin/env python3
"""Quick start example: recover a secret from arbitrary-base shares.

Demonstrates the core workflow:
  1. Decode raw share records into exact integer points
  2. Reconstruct the secret by Lagrange interpolation at x=0
  3. Detect an inconsistent share set
"""

from pathlib import Path

from shrec.decoder import decode_records
from shrec.document import load_document
from shrec.errors import NonIntegerResult
from shrec.interpolation import reconstruct_secret
from shrec.models import Point

# --- 1. Decode the shares of f(x) = x^2 + 3 ---
document = load_document(Path(__file__).with_name("shares.json"))
points = decode_records(document.records)

print(f"Decoded {len(points)} shares (k={document.threshold}):")
for p in points:
    print(f"  x={p.x}  y={p.y}")

# --- 2. Reconstruct from the first k shares by x ---
secret = reconstruct_secret(points, document.threshold)
print(f"\nSecret: {secret}")

# --- 3. A tampered share no longer yields an integer constant term ---
tampered = [Point(1, 4), Point(2, 7), Point(4, 20)]
try:
    reconstruct_secret(tampered, 3)
except NonIntegerResult as exc:
    print(f"\nTampered set rejected: {exc}")
