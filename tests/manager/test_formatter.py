from compose_manager.manager import format_command
from compose_manager.types import ComposeFileCollection


def test_files_come_before_project_name_and_subcommand():
    files = ComposeFileCollection.from_input(["a.yml", "b.yml"]).with_project_name("demo")

    invocation = format_command("up -d", files)

    assert invocation.argv == [
        "docker-compose",
        "-f",
        "a.yml",
        "-f",
        "b.yml",
        "--project-name",
        "demo",
        "up",
        "-d",
    ]


def test_empty_collection_passes_only_subcommand():
    invocation = format_command("ps", ComposeFileCollection())

    assert invocation.args == ("ps",)


def test_project_name_without_files():
    invocation = format_command("stop", ComposeFileCollection(project_name="demo"))

    assert invocation.args == ("--project-name", "demo", "stop")


def test_subcommand_as_token_sequence_is_kept_verbatim():
    invocation = format_command(["run", "--rm", "web", "echo", "hello world"], ComposeFileCollection())

    assert invocation.args == ("run", "--rm", "web", "echo", "hello world")


def test_subcommand_text_is_split_shell_style():
    invocation = format_command("run --rm web sh -c 'echo hi'", ComposeFileCollection())

    assert invocation.args == ("run", "--rm", "web", "sh", "-c", "echo hi")


def test_cwd_and_env_default_to_inherit():
    invocation = format_command("ps", ComposeFileCollection(), cwd="", env={})

    assert invocation.cwd is None
    assert invocation.env is None


def test_cwd_env_and_program_overrides():
    invocation = format_command(
        "ps",
        ComposeFileCollection(),
        cwd="/srv/app",
        env={"COMPOSE_HTTP_TIMEOUT": "120"},
        program="/usr/local/bin/docker-compose",
    )

    assert invocation.program == "/usr/local/bin/docker-compose"
    assert invocation.cwd == "/srv/app"
    assert invocation.env == {"COMPOSE_HTTP_TIMEOUT": "120"}


def test_command_line_is_shell_quoted():
    files = ComposeFileCollection.from_input("my file.yml")

    invocation = format_command("config", files)

    assert invocation.command_line == "docker-compose -f 'my file.yml' config"


def test_empty_project_name_is_omitted():
    invocation = format_command("ps", ComposeFileCollection.from_input("a.yml").with_project_name(""))

    assert invocation.args == ("-f", "a.yml", "ps")


def test_program_defaults_to_configured_compose_binary(monkeypatch):
    monkeypatch.setenv("COMPOSE_MANAGER_COMPOSE_BINARY", "/opt/bin/docker-compose")

    invocation = format_command("ps", ComposeFileCollection())

    assert invocation.program == "/opt/bin/docker-compose"
