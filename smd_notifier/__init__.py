"""
SMD Notifier - Signal meta-data file delivery

Notifies a business application about received Receipt and Error signals by
writing a signal meta-data (SMD) XML document per signal to a target directory.
"""

__version__ = "0.1.0"
__author__ = "SMD Notifier Team"
