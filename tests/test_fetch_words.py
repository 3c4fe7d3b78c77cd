from script.fetch_words import parse_answers, unique_preserve_order

PAGE = """
<html><body>
<h1>Past answers</h1>
<ul>
  <li>2024-03-02 (Saturday) 987 <b>CRANE</b></li>
  <li>2024-03-01 (Friday) 986 <b>SLATE</b></li>
  <li>2024-02-29 (Thursday) 985 <b>CRANE</b></li>
</ul>
</body></html>
"""


def test_parse_answers_offline():
    assert parse_answers(PAGE) == ["crane", "slate"]


def test_unique_preserve_order():
    assert unique_preserve_order(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]
