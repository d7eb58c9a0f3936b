"""The core of the Tessera framework: the element abstraction,
the configuration snapshots and the behaviors attachable to widgets.
"""
