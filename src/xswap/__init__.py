"""
XSwap - Currency Quote & Validation Engine

Turns a (source currency, target currency, amount) triple plus a price
snapshot into either a quote or a classified validation error, and drives
the asynchronous swap submission state machine behind a currency swap form.
"""

__version__ = "1.0.0"
