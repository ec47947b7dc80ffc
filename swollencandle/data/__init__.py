"""
Data model module.

Defines trades, candles and the named periods candles can be upscaled to.
"""
