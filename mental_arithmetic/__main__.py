"""Allow `python -m mental_arithmetic`."""

from mental_arithmetic.cli.main import run

run()
