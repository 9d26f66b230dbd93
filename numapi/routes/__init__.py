"""
NumAPI — API Routes Package
=============================

Route Inventory:
    - numbers.py:  ANY /{path}   (catch-all, delegates to DispatchService)

Routes stay thin: they pass the request path to the dispatch service and
return whatever response it produces.
"""
