#!/usr/bin/env python3
"""
Demo: Build a prefilled URL from the example form.

Shows the effect of each rule: usp rewrite, {today} substitution,
and the "Other" radio option.
"""

from datetime import date

from prefill.config_loader import form_spec_to_yaml
from prefill.examples import build_example_form_spec
from prefill.url_builder import build_from_spec


def main():
    spec = build_example_form_spec()

    print("=" * 80)
    print("PREFILL DEMO")
    print("=" * 80)

    print("\nCONFIG:")
    print("-" * 80)
    print(form_spec_to_yaml(spec))

    result = build_from_spec(spec, today=date.today())

    print("DECODED URL:")
    print("-" * 80)
    print(result.decoded)

    print("\nENCODED URL:")
    print("-" * 80)
    print(result.encoded)

    print("\n" + "=" * 80)
    print("To start your own config:")
    print("  prefill --init")
    print("=" * 80)


if __name__ == "__main__":
    main()
