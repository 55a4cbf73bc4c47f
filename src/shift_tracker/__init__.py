"""Shift Tracker package.

Feature modules (shifts, earnings, storage, ...) with a thin Flask controller
layer on top of service/repository layers.
"""
