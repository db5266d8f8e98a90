"""FinanzasMaster: personal finance calculators.

The numeric engines live in :mod:`finanzasmaster.calculators`; the Streamlit
helpers used by ``app.py`` live in :mod:`finanzasmaster.components`.
"""

__version__ = "1.0.0"
