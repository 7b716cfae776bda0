"""Application composition layer for the SkyVentor client.

The controller wires adapters, use cases, and view models into one client
session; intents route user actions to view-model commands.
"""
