from htmlcheck.diagnostics import Diagnostic, filter_diagnostics, format_diagnostic_line, should_include


def test_content_type_notice_without_line_is_suppressed() -> None:
    message = "The Content-Type was “text/html”. Using the HTML parser."

    assert should_include(message, None) is False
    assert should_include(message, 0) is False


def test_schema_notice_without_line_is_suppressed() -> None:
    message = "Using the schema for HTML with SVG 1.1, MathML 3.0, RDFa 1.1, and ITS 2.0 support."

    assert should_include(message, None) is False


def test_document_notices_with_a_line_are_kept() -> None:
    assert should_include("The Content-Type was text/html.", 4) is True
    assert should_include("Using the schema for HTML.", 12) is True


def test_google_fonts_pipe_complaint_is_suppressed_on_any_line() -> None:
    message = (
        "Bad value “https://fonts.googleapis.com/css?family=Open+Sans|Roboto” "
        "for attribute “href” on element “link”: Illegal character in query: “|” is not allowed."
    )

    assert should_include(message, 7) is False
    assert should_include(message, None) is False


def test_google_fonts_value_without_pipe_is_kept() -> None:
    message = "Bad value “https://fonts.googleapis.com/css?family=Open Sans” for attribute “href”."

    assert should_include(message, 7) is True


def test_unneeded_role_warning_is_suppressed() -> None:
    message = "The “banner” role is unnecessary for element “header”. Element header does not need a role attribute."

    assert should_include(message, 9) is False
    assert should_include("ELEMENT NAV DOES NOT NEED A ROLE", 2) is False


def test_other_messages_are_kept() -> None:
    assert should_include("Element “title” must not be empty.", 5) is True
    assert should_include("Start tag seen without seeing a doctype first.", None) is True


def test_filter_diagnostics_keeps_order_of_survivors() -> None:
    diagnostics = [
        Diagnostic(message="Stray end tag “div”.", line=10, last_line=10),
        Diagnostic(message="The Content-Type was text/html. Using the HTML parser."),
        Diagnostic(message="Element “img” is missing required attribute “src”.", line=3, last_line=3),
    ]

    kept = filter_diagnostics(diagnostics)

    assert [d.line for d in kept] == [10, 3]


def test_format_diagnostic_line() -> None:
    assert format_diagnostic_line(12, "Stray end tag “div”.") == "Line 12: Stray end tag “div”."
    assert format_diagnostic_line(None, "No line.") == "Line 0: No line."
