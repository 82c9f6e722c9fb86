"""
CLI Commands Module

- forecast: Aurora verdict and location appearance prediction
- geomagnetic: Coordinate transform, auroral oval and reference cities
"""
