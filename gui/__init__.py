"""GUI layer of the recipe search app.

Holds the recipes state container (``gui.state``), the in-process router and
the services that feed search results into the state. Nothing here needs a
display server, so the package imports cleanly in headless test runs.
"""
