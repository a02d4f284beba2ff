"""Software storefront service.

This package contains the catalog API, the admin CRUD endpoints, the site
configuration store and the product slug assignment core.
"""

__version__ = "0.1.0"
