"""
HelloRest — API Routes Package
===============================

Route Inventory (mounted under settings.context_path, default /camel):
    - forms.py:      POST /forms
    - say_hello.py:  GET  /say/hello
                     GET  /say/hello/{name}
                     GET  /say/helloObject/{name}
                     GET  /say/greetings/{name}
    - health.py:     GET  /health  (outside the context path)

`ROUTE_TABLE` is the ordered, immutable concatenation of every module's rows.
"""

from hellorest.routes import forms, say_hello

ROUTE_TABLE = forms.ROUTES + say_hello.ROUTES
