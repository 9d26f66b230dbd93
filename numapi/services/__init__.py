"""
NumAPI — Services Layer
=========================

Service Inventory:
    - ComputationProvider (abstract): parity / primality / factorial contract
    - BuiltinComputationProvider: fixed-width pure-Python implementation
    - provider_factory: provider selection from settings
    - DispatchService: route → validate → compute → format orchestration
"""
