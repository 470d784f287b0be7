"""Task management backend: passwordless email login and per-user task CRUD."""
