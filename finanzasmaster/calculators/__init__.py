"""Helper package that exposes the core financial calculators.

The `calculators` package contains small, focused modules, one per tool:

* ``compound`` – month-by-month compound interest projection with contributions.
* ``salary`` – net salary and withholding using progressive brackets and minimum allowances.
* ``fire`` – FIRE number and time needed to reach it.
* ``pension`` – how long savings last when topping up a public pension.

Every module exposes frozen input/result records and pure functions over
them.  See individual docstrings for details.
"""

from . import compound, salary, fire, pension  # noqa: F401

__all__ = ["compound", "salary", "fire", "pension"]
