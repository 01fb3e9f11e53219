import argparse
from xml.sax.saxutils import escape

import requests


DEFAULT_URL = "http://127.0.0.1:10000/cc5/pay"
SAMPLE_KINDS = ("payment", "three_d", "loyalty")


class SampleClientError(RuntimeError):
    pass


def build_sample_request(kind: str, order_id: str | None = None) -> str:
    if kind not in SAMPLE_KINDS:
        raise ValueError(f"unknown sample kind '{kind}'")

    extra = ""
    if kind == "three_d":
        extra = "<STORETYPE>3d</STORETYPE>"
    elif kind == "loyalty":
        extra = "<MAXIPUANSORGU>MAXIPUANSORGU</MAXIPUANSORGU>"

    order = f"<OrderId>{escape(order_id)}</OrderId>" if order_id else "<OrderId></OrderId>"
    return (
        "<CC5Request>"
        "<Name>mockuser</Name>"
        "<Password>mockpass</Password>"
        "<ClientId>100100000</ClientId>"
        "<Type>Auth</Type>"
        f"{order}"
        "<Total>10.00</Total>"
        "<Currency>949</Currency>"
        f"<Extra>{extra}</Extra>"
        "</CC5Request>"
    )


def send_sample_request(url: str, body: str, timeout_seconds: int = 5) -> str:
    try:
        resp = requests.post(
            url,
            data=body.encode("utf-8"),
            headers={"Content-Type": "application/xml; charset=utf-8"},
            timeout=timeout_seconds,
        )
    except requests.RequestException as e:
        raise SampleClientError(f"Failed to reach mock server: {e}") from e

    if resp.status_code != 200:
        raise SampleClientError(f"Mock server error {resp.status_code}: {resp.text}")
    return resp.text


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Send a sample CC5Request to the XML mock")
    parser.add_argument("--url", default=DEFAULT_URL)
    parser.add_argument("--kind", choices=SAMPLE_KINDS, default="payment")
    parser.add_argument("--order-id", default=None)
    args = parser.parse_args(argv)

    body = build_sample_request(args.kind, args.order_id)
    print(f"POST {args.url}\n{body}\n")
    print(send_sample_request(args.url, body))


if __name__ == "__main__":
    main()
