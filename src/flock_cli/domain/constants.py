"""
Fixed content written by `flock init`.
"""

from flock_cli.domain.entities import FrameworkType

FLOCK_REPOSITORY_URL: str = "https://github.com/jakeheis/Flock"
FLOCK_MAJOR_VERSION: int = 0
DEPENDENCIES_PACKAGE_NAME: str = "FlockDependencies"

GITIGNORE_MARKER: str = "# Flock"

PROJECT_NAME_PLACEHOLDER: str = "nil // Fill this in!"
EXECUTABLE_NAME_PLACEHOLDER: str = (
    "nil // Fill this in! (same as Config.projectName unless your project is divided into modules)"
)

# Checked in this order; the first declared dependency that matches wins.
FRAMEWORK_REPOSITORIES: tuple[tuple[str, FrameworkType], ...] = (
    ("https://github.com/vapor/vapor", FrameworkType.VAPOR),
    ("https://github.com/Zewo/Zewo", FrameworkType.ZEWO),
    ("https://github.com/IBM-Swift/Kitura", FrameworkType.KITURA),
    ("https://github.com/PerfectlySoft/Perfect", FrameworkType.PERFECT),
)

# environment name -> (file stem under deploy/, Swift class name)
ENVIRONMENTS: dict[str, tuple[str, str]] = {
    "base": ("Always", "Base"),
    "production": ("Production", "Production"),
    "staging": ("Staging", "Staging"),
}

FLOCKFILE_TEMPLATE: str = """import Flock

Flock.configure(base: Base(), environments: [Production(), Staging()])

Flock.use(.deploy)
Flock.use(.swiftenv)
Flock.use(.server)

Flock.run()
"""

DEPENDENCIES_TEMPLATE: str = f"""{{
    "dependencies" : [
        {{
            "url" : "{FLOCK_REPOSITORY_URL}",
            "major": {FLOCK_MAJOR_VERSION}
        }}
    ]
}}
"""

ENV_CONFIG_DEFAULTS: tuple[str, ...] = (
    "// Config.SSHAuthMethod = SSH.Key(",
    '//     privateKey: "~/.ssh/key",',
    '//     passphrase: "passphrase"',
    "// )",
    '// Servers.add(ip: "9.9.9.9", user: "user", roles: [.app, .db, .web])',
)

BASE_DEFAULTS_TEMPLATE: tuple[str, ...] = (
    "Config.projectName = {project_name}",
    "Config.executableName = {executable_name}",
    "Config.repoURL = nil // Fill this in!",
    "",
    "Config.serverFramework = {framework}Framework()",
    "Config.processController = Nohup() // Other option: Supervisord()",
    "",
    "// IF YOU PLAN TO RUN `flock tools` AS THE ROOT USER BUT `flock deploy` AS A DEDICATED DEPLOY USER,",
    "// (as you should, see https://github.com/jakeheis/Flock/blob/master/README.md#permissions)",
    "// SET THIS VARIABLE TO THE NAME OF YOUR (ALREADY CREATED) DEPLOY USER BEFORE RUNNING `flock tools`:",
    '// Config.supervisordUser = "deploy:deploy"',
    "",
    "// Optional config:",
    '// Config.deployDirectory = "/var/www"',
    '// Config.swiftVersion = "3.0.2" // If you have a `.swift-version` file, this line is not necessary',
)

ENVIRONMENT_FILE_TEMPLATE: str = """import Flock

class {class_name}: Environment {{
    func configure() {{
{body}
    }}
}}
"""

PACKAGE_FILE_TEMPLATE: str = """import PackageDescription

let package = Package(
    name: "{name}",
    dependencies: [
{dependencies}
    ]
)
"""

PACKAGE_DEPENDENCY_LINE: str = '        .Package(url: "{url}", majorVersion: {major}),'
