"""
HelloRest — Services Layer
===========================

Service Inventory:
    - Greeter: the greeting component behind the /say routes
"""
