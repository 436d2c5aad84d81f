import pytest
from domainsage.suffix.rules import build_rule_table


SAMPLE_SUFFIX_LIST = """\
// ===BEGIN ICANN DOMAINS===

// com : https://en.wikipedia.org/wiki/.com
com

// uk : https://en.wikipedia.org/wiki/.uk
uk
co.uk
*.sch.uk

// ck : https://en.wikipedia.org/wiki/.ck
*.ck
!www.ck

// jp
jp
kobe.jp
*.kobe.jp
!city.kobe.jp

// ===END ICANN DOMAINS===
// ===BEGIN PRIVATE DOMAINS===

// GitHub, Inc.
github.io

// ===END PRIVATE DOMAINS===
"""


@pytest.fixture
def sample_list_text():
    return SAMPLE_SUFFIX_LIST


@pytest.fixture
def psl_rules():
    return build_rule_table(SAMPLE_SUFFIX_LIST.splitlines())


@pytest.fixture
def psl_file(tmp_path):
    path = tmp_path / "public_suffix_list.dat"
    path.write_text(SAMPLE_SUFFIX_LIST, encoding="utf-8")
    return path
