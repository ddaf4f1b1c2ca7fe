"""jwt-kit: mint RS256 JWTs signed by an embedded development keypair."""

__version__ = "0.1.0"
