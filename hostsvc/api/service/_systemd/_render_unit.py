"""Render systemd service and socket unit files from a service descriptor."""

from ..ServiceConfig import ServiceConfig
from ._escape import cmd, cmd_escape

ENVIRONMENT_DIR = "/etc/sysconfig"

# Fixed policy; changing these is a template change, not a descriptor field
START_LIMIT_INTERVAL = 5
START_LIMIT_BURST = 10
RESTART_POLICY = "always"
RESTART_SEC = 120

SOCKET_TEMPLATE = """\
[Unit]
Description={socket_description}

[Socket]
ListenStream={socket_port}
NoDelay=true
"""


def _optional(key: str, value: object | None) -> list[str]:
    if value is None or value == "":
        return []
    return [f"{key}={value}"]


def render_service_unit(config: ServiceConfig, exec_path: str) -> str:
    """Render the ``.service`` unit text.

    Optional fields produce a line only when set; absent fields leave no
    trace in the output.
    """
    options = config.options
    path = cmd_escape(exec_path)
    exec_start = " ".join([path, *(cmd(arg) for arg in config.arguments)])

    lines = [
        "[Unit]",
        f"Description={config.description}",
        f"ConditionFileIsExecutable={path}",
    ]
    if config.with_socket:
        lines.append(f"Requires={config.name}.socket")

    lines += ["", "[Service]"]
    if config.with_socket:
        lines.append("NonBlocking=true")
    lines += [
        f"StartLimitInterval={START_LIMIT_INTERVAL}",
        f"StartLimitBurst={START_LIMIT_BURST}",
        *_optional("LimitNOFILE", config.limit_nofile),
        f"ExecStart={exec_start}",
        *_optional("RootDirectory", cmd(config.chroot) if config.chroot else None),
        *_optional("WorkingDirectory", cmd_escape(config.working_directory) if config.working_directory else None),
        *_optional("User", config.user_name),
    ]
    if options.reload_signal:
        lines.append(f'ExecReload=/bin/kill -{options.reload_signal} "$MAINPID"')
    lines += [
        *_optional("PIDFile", cmd(options.pid_file) if options.pid_file else None),
        *_optional("UMask", config.umask),
        f"Restart={RESTART_POLICY}",
        f"RestartSec={RESTART_SEC}",
        f"EnvironmentFile=-{ENVIRONMENT_DIR}/{config.name}",
        "",
        "[Install]",
        "WantedBy=multi-user.target",
    ]
    return "\n".join(lines) + "\n"


def render_socket_unit(config: ServiceConfig) -> str:
    """Render the ``.socket`` unit text used for socket activation."""
    return SOCKET_TEMPLATE.format(
        socket_description=config.socket_description,
        socket_port=config.socket_port,
    )
