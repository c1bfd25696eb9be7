"""
Example form builder used by `prefill --init` and the demo script.

Covers the answer shapes a typical attendance/report form needs: plain text,
the {today} date token, a radio button's "Other" choice plus its free text.
"""
from prefill.model import Entry, FormSpec
from prefill.url_builder import TODAY_TOKEN

EXAMPLE_BASE_URL = "https://docs.google.com/forms/d/e/TEST/viewform?usp=sf_link"

OTHER_OPTION = "__other_option__"
OTHER_RESPONSE_SUFFIX = ".other_option_response"


def build_example_form_spec(base_url: str = EXAMPLE_BASE_URL) -> FormSpec:
    spec = FormSpec(base_url=base_url)

    spec.entries = [
        Entry(question_id="917226918", answer="Tokyo", comment="Office location"),
        Entry(question_id="59099188", answer=TODAY_TOKEN, comment="Date (yyyy-mm-dd)"),
        Entry(question_id="646785265", answer="1234567890", comment="Employee number"),
        Entry(question_id="1446251705", answer="Taro Yamada", comment="Full name"),
    ]

    # Radio button: pick "Other", then fill its text box
    radio_id = "237993201"
    spec.entries.append(
        Entry(question_id=radio_id, answer=OTHER_OPTION, comment="Radio button: select Other")
    )
    spec.entries.append(
        Entry(
            question_id=radio_id + OTHER_RESPONSE_SUFFIX,
            answer="Free text",
            comment="Radio button: text for Other",
        )
    )

    return spec
