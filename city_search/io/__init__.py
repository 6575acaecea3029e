"""Input/output front-ends for the city search app.

The web page lives in ``apps/app.py``; this subpackage holds the
terminal prompt loop, which drives the same page controller.
"""
