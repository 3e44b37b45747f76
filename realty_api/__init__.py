"""Real-estate marketing site: REST API, landing page and admin panel."""
