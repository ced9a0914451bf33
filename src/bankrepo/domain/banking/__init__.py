"""Banking domain package.

This package contains the domain model for bank records: the read and write
value objects, the lifecycle status, the repository contract and the error
kinds the repository raises.
"""
