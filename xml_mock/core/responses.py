from __future__ import annotations

from datetime import datetime, timezone
from xml.sax.saxutils import escape

from .models import MockProfile, ResponseKind


XML_CONTENT_TYPE = "application/xml; charset=utf-8"
INVALID_XML_BODY = "<error>Invalid XML</error>"
TRXDATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_trx_date(now: datetime) -> str:
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return now.strftime(TRXDATE_FORMAT)


def render_three_d_secure(order_id: str) -> str:
    return f"""<CC5Response>
    <OrderId>{escape(order_id)}</OrderId>
    <ProcReturnCode>00</ProcReturnCode>
    <Response>Approved</Response>
    <ErrMsg></ErrMsg>
    <Extra>
        <ERRORCODE></ERRORCODE>
        <NUMCODE>00</NUMCODE>
        <HOSTMSG>3D Secure Doğrulama Gerekli</HOSTMSG>
    </Extra>
</CC5Response>"""


def render_loyalty_points_query(order_id: str, balance: str) -> str:
    balance = escape(balance)
    return f"""<CC5Response>
    <ErrMsg></ErrMsg>
    <OrderId>{escape(order_id)}</OrderId>
    <ProcReturnCode>00</ProcReturnCode>
    <Response>Approved</Response>
    <AuthCode>P11222</AuthCode>
    <TransId>25328LPjH13565</TransId>
    <HostRefNum>532800067953</HostRefNum>
    <Extra>
        <ERRORCODE></ERRORCODE>
        <NUMCODE>00</NUMCODE>
        <HOSTMSG>TOPLAMMAXIPUAN: {balance} TL</HOSTMSG>
        <MAXIPUAN>{balance}</MAXIPUAN>
        <HOSTDATE>1124-111536</HOSTDATE>
    </Extra>
</CC5Response>"""


def render_standard_payment(order_id: str, now: datetime) -> str:
    order_id = escape(order_id)
    return f"""<CC5Response>
    <OrderId>{order_id}</OrderId>
    <GroupId>{order_id}</GroupId>
    <Response>Approved</Response>
    <AuthCode>621715</AuthCode>
    <HostRefNum>531113545069</HostRefNum>
    <ProcReturnCode>00</ProcReturnCode>
    <TransId>25311NVIA12472</TransId>
    <ErrMsg></ErrMsg>
    <Extra>
        <SETTLEID>2885</SETTLEID>
        <TRXDATE>{format_trx_date(now)}</TRXDATE>
        <ERRORCODE></ERRORCODE>
        <CARDBRAND>MASTERCARD</CARDBRAND>
        <CARDISSUER>AKBANK T.A.S.</CARDISSUER>
        <KAZANILANPUAN>000000010.00</KAZANILANPUAN>
        <NUMCODE>00</NUMCODE>
    </Extra>
</CC5Response>"""


def render_response(
    kind: ResponseKind,
    *,
    order_id: str,
    now: datetime,
    profile: MockProfile,
) -> str:
    if kind == ResponseKind.THREE_D_SECURE:
        return render_three_d_secure(order_id)
    if kind == ResponseKind.LOYALTY_POINTS_QUERY:
        return render_loyalty_points_query(order_id, profile.loyalty_points_balance)
    return render_standard_payment(order_id, now)
