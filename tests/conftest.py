"""Shared pytest fixtures for locksentinel tests."""

import pytest

from locksentinel.lockfile import LockModel

# pnpm lockfile v9: importers + packages + snapshots
LOCK_V9 = """\
lockfileVersion: '9.0'

settings:
  autoInstallPeers: true
  excludeLinksFromLockfile: false

importers:

  .:
    dependencies:
      '@ant-design/icons':
        specifier: ^4.8.0
        version: 4.8.3(react-dom@18.3.1(react@18.3.1))(react@18.3.1)
      react:
        specifier: ^18.3.1
        version: 18.3.1
    devDependencies:
      typescript:
        specifier: ^5.4.0
        version: 5.4.5

  packages/web:
    dependencies:
      lodash:
        specifier: 4.17.21
        version: 4.17.21
    optionalDependencies:
      fsevents:
        specifier: ^2.3.2
        version: 2.3.3

packages:

  '@ant-design/icons@4.8.3':
    resolution: {integrity: sha512-aaaa}
    peerDependencies:
      react: '>=16.0.0'

  fsevents@2.3.3:
    resolution: {integrity: sha512-bbbb}
    os: [darwin]

  lodash@4.17.21:
    resolution: {integrity: sha512-cccc}

  react@18.3.1:
    resolution: {integrity: sha512-dddd}

  typescript@5.4.5:
    resolution: {integrity: sha512-eeee}
    hasBin: true

snapshots:

  '@ant-design/icons@4.8.3(react-dom@18.3.1(react@18.3.1))(react@18.3.1)':
    dependencies:
      react: 18.3.1
      lodash: 4.17.20

  fsevents@2.3.3:
    optional: true

  lodash@4.17.21: {}

  react@18.3.1: {}

  typescript@5.4.5: {}
"""

# pnpm lockfile v6: single project, direct deps at top level, slash-prefixed keys
LOCK_V6 = """\
lockfileVersion: '6.0'

dependencies:
  express:
    specifier: ^4.18.0
    version: 4.18.2

devDependencies:
  '@babel/core':
    specifier: ^7.24.0
    version: 7.24.0

packages:

  /express@4.18.2:
    resolution: {integrity: sha512-ffff}
    dev: false

  /@babel/core@7.24.0:
    resolution: {integrity: sha512-gggg}
    dev: true
"""

# Only a direct dependency and its package definition.
LOCK_REACT_ONLY = """\
lockfileVersion: '9.0'

importers:
  .:
    dependencies:
      react:
        specifier: ^18.3.1
        version: 18.3.1

packages:
  react@18.3.1:
    resolution: {integrity: sha512-dddd}
"""

STANDARD_LIST = (
    "Row\tPackage Name\tVersion(s)\n"
    "1\t@ctrl/tinycolor\t4.1.1, 4.1.2\n"
    "2\tlodash\t4.17.21, 4.17.20\n"
    "3\treact\t\n"
)

SECURITY_REPORT = (
    "Package Name\tCompromised Version(s)\tDetection Date\tStatus\n"
    "@ant-design/icons\t4.8.3\t2025-09-16\tCompromised\n"
    "typescript\t5.4.4, 5.4.5\t2025-09-17\tUnder review\n"
)


@pytest.fixture
def lock_v9() -> LockModel:
    return LockModel.load(LOCK_V9)


@pytest.fixture
def lock_v6() -> LockModel:
    return LockModel.load(LOCK_V6)


@pytest.fixture
def lock_react_only() -> LockModel:
    return LockModel.load(LOCK_REACT_ONLY)


@pytest.fixture
def lock_v9_text() -> str:
    return LOCK_V9


@pytest.fixture
def lock_react_only_text() -> str:
    return LOCK_REACT_ONLY


@pytest.fixture
def standard_list_text() -> str:
    return STANDARD_LIST


@pytest.fixture
def security_report_text() -> str:
    return SECURITY_REPORT
