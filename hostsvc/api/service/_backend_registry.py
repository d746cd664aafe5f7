"""Registry of service backends (ONLY place backend types are enumerated)."""

# name -> (backend package under hostsvc.api.service, directory that exists when the init system is running)
_BACKEND_REGISTRY: dict[str, tuple[str, str]] = {
    "systemd": ("_systemd", "/run/systemd/system"),
}
