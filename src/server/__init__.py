"""HTTP API for lecturenotes."""
