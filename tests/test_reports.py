from divination.engines.iching import IChingEngine
from divination.engines.numerology import NumerologyEngine
from divination.engines.tarot import TarotEngine
from divination.models import DivinationInput
from divination.three_layer import generate_three_layer_interpretation
from reports import PDFGenerator, ReportGenerator, generate_pdf_report


def test_text_report_for_tarot(sample_input, options):
    result = TarotEngine(sample_input, options=options).calculate()
    three_layer = generate_three_layer_interpretation('tarot', result)
    report = ReportGenerator().generate_text_report(sample_input, 'tarot', result, three_layer)
    assert 'タロット占い' in report
    assert sample_input.full_name in report
    assert result.core_meaning in report
    for position in result.positions:
        assert position.card.name in report
    assert '3層解釈' in report


def test_text_report_for_numerology(sample_input, options):
    result = NumerologyEngine(sample_input, options=options).calculate()
    report = ReportGenerator().generate_text_report(sample_input, 'numerology', result)
    assert '数秘マトリクス' in report
    assert '1990年05月15日' in report


def test_text_report_with_invalid_birth(options):
    data = DivinationInput(birth_date='invalid')
    result = IChingEngine(data, options=options).calculate()
    report = ReportGenerator().generate_text_report(data, 'iching', result)
    assert '（不明）' in report
    assert '本卦' in report


def test_hexagram_image(sample_input, options):
    result = IChingEngine(sample_input, options=options).calculate()
    image = ReportGenerator().generate_hexagram_image(result)
    assert image.startswith(b'\x89PNG')


def test_visual_matrix(sample_input, options):
    result = NumerologyEngine(sample_input, options=options).calculate()
    image = ReportGenerator().generate_visual_matrix(result)
    assert image.startswith(b'\x89PNG')


def test_pdf(sample_input, options):
    result = NumerologyEngine(sample_input, options=options).calculate()
    pdf = PDFGenerator().generate_pdf(sample_input, 'numerology', result)
    assert pdf.startswith(b'%PDF')


def test_pdf_shortcut_accepts_dict(sample_input):
    pdf = generate_pdf_report(sample_input, 'akashic', {'core_meaning': '魂の記録 <テスト> & 確認'})
    assert pdf.startswith(b'%PDF')
