"""Config subpackage - settings and default business inputs."""
