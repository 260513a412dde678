"""
ThermoGuard Client
==================

This is the Python package for talking to the ThermoGuard
temperature-monitoring API.

HOW IT'S ORGANIZED:
------------------
- config.py     = Where the API is and what the limits are
- exceptions.py = Everything that can go wrong
- models/       = Data structures (what does a sensor / reading look like?)
- services/     = Workers (talk to the API, map wire data to models)
- utils/        = Validation and temperature banding (no I/O)
- main.py       = Builds the services and cleans them up

Author: ThermoGuard Team
"""
