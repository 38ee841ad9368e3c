from __future__ import annotations

# OPTIONS is answered by the CORS middleware before routing.
ANY_METHOD = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"]
