from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

SAMPLE_OFX = textwrap.dedent(
    """\
    OFXHEADER:100
    DATA:OFXSGML
    VERSION:102
    SECURITY:NONE
    ENCODING:USASCII
    CHARSET:1252
    COMPRESSION:NONE
    OLDFILEUID:NONE
    NEWFILEUID:NONE

    <OFX>
    <SIGNONMSGSRSV1>
    <SONRS>
    <STATUS>
    <CODE>0
    <SEVERITY>INFO
    </STATUS>
    <DTSERVER>20130120
    <LANGUAGE>ENG
    </SONRS>
    </SIGNONMSGSRSV1>
    <BANKMSGSRSV1>
    <STMTTRNRS>
    <TRNUID>1
    <STATUS>
    <CODE>0
    <SEVERITY>INFO
    </STATUS>
    <STMTRS>
    <CURDEF>EUR
    <BANKACCTFROM>
    <BANKID>12345
    <ACCTID>000111222
    <ACCTTYPE>CHECKING
    </BANKACCTFROM>
    <BANKTRANLIST>
    <DTSTART>20130101
    <DTEND>20130131
    <STMTTRN>
    <TRNTYPE>DEBIT
    <DTPOSTED>20130115
    <DTUSER>20130115
    <TRNAMT>1,024.00
    <FITID>A1
    <NAME>Acme Corp.
    <MEMO>invoice 42
    </STMTTRN>
    <STMTTRN>
    <TRNTYPE>CREDIT
    <DTPOSTED>20130116
    <DTUSER>20130116
    <TRNAMT>50
    <FITID>A2
    <NAME>Payroll.
    <MEMO>january
    </STMTTRN>
    </BANKTRANLIST>
    <LEDGERBAL>
    <BALAMT>974.00
    <DTASOF>20130131
    </LEDGERBAL>
    </STMTRS>
    </STMTTRNRS>
    </BANKMSGSRSV1>
    </OFX>
    """
)

EMPTY_OFX = textwrap.dedent(
    """\
    OFXHEADER:100
    DATA:OFXSGML
    VERSION:102
    SECURITY:NONE
    ENCODING:USASCII
    CHARSET:1252
    COMPRESSION:NONE
    OLDFILEUID:NONE
    NEWFILEUID:NONE

    <OFX>
    <SIGNONMSGSRSV1>
    <SONRS>
    <STATUS>
    <CODE>0
    <SEVERITY>INFO
    </STATUS>
    <DTSERVER>20130120
    <LANGUAGE>ENG
    </SONRS>
    </SIGNONMSGSRSV1>
    </OFX>
    """
)


@pytest.fixture
def sample_ofx(tmp_path: Path) -> Path:
    target = tmp_path / 'statement.ofx'
    target.write_text(SAMPLE_OFX, encoding='ascii')
    return target


@pytest.fixture
def empty_ofx(tmp_path: Path) -> Path:
    target = tmp_path / 'empty.ofx'
    target.write_text(EMPTY_OFX, encoding='ascii')
    return target


@pytest.fixture
def blank_memo_ofx(tmp_path: Path) -> Path:
    target = tmp_path / 'blank_memo.ofx'
    target.write_text(SAMPLE_OFX.replace('<MEMO>invoice 42', '<MEMO>'), encoding='ascii')
    return target


XML_OFX = textwrap.dedent(
    """\
    <?xml version="1.0" encoding="UTF-8" standalone="no"?>
    <?OFX OFXHEADER="200" VERSION="220" SECURITY="NONE" OLDFILEUID="NONE" NEWFILEUID="NONE"?>
    <OFX>
    <BANKMSGSRSV1>
    <STMTTRNRS>
    <TRNUID>1</TRNUID>
    <STMTRS>
    <CURDEF>USD</CURDEF>
    <BANKTRANLIST>
    <DTSTART>20130101</DTSTART>
    <DTEND>20130131</DTEND>
    <STMTTRN>
    <TRNTYPE>DEBIT</TRNTYPE>
    <DTPOSTED>20130115</DTPOSTED>
    <DTUSER>20130115</DTUSER>
    <TRNAMT>-5.00</TRNAMT>
    <FITID>X1</FITID>
    <NAME>Shop.</NAME>
    </STMTTRN>
    </BANKTRANLIST>
    </STMTRS>
    </STMTTRNRS>
    </BANKMSGSRSV1>
    </OFX>
    """
)


@pytest.fixture
def xml_ofx(tmp_path: Path) -> Path:
    target = tmp_path / 'statement_v2.ofx'
    target.write_text(XML_OFX, encoding='utf-8')
    return target
