from pipeline.normalize import has_value_changed, normalize_date_for_comparison, normalize_identifier


class TestIdentifierNormalization:
    """Test HB / HAWB normalization."""

    def test_scientific_notation_expanded(self):
        assert normalize_identifier('6.17E+08') == '617000000'
        assert normalize_identifier('6.17e+08') == '617000000'
        assert normalize_identifier(' 8.1E+07 ') == '81000000'

    def test_alphanumeric_preserved(self):
        assert normalize_identifier('62R0537240') == '62R0537240'
        assert normalize_identifier('AB-778') == 'AB-778'

    def test_case_preserved(self):
        """Identifiers are never upper-cased."""
        assert normalize_identifier('abc123') == 'abc123'
        assert normalize_identifier('XyZ789') == 'XyZ789'

    def test_trim(self):
        assert normalize_identifier('  HB1001  ') == 'HB1001'

    def test_non_scientific_is_trim_only(self):
        for raw in ['HB1001', ' 12.50 ', 'E12', '1E', '6.17E+08X', 'mixed Case 1']:
            assert normalize_identifier(raw) == raw.strip()

    def test_empty_values(self):
        assert normalize_identifier(None) == ''
        assert normalize_identifier('') == ''
        assert normalize_identifier('   ') == ''

    def test_numbers_from_spreadsheet_readers(self):
        assert normalize_identifier(617000000.0) == '617000000'
        assert normalize_identifier(12345) == '12345'

    def test_nan_from_spreadsheet_readers(self):
        assert normalize_identifier(float('nan')) == ''

    def test_unparseable_scientific_falls_back(self):
        """Overflowing exponents keep the trimmed original instead of raising."""
        assert normalize_identifier(' 1e400 ') == '1e400'

    def test_negative_scientific(self):
        assert normalize_identifier('-1.5E+02') == '-150'


class TestValueChanged:
    """Test change detection for tracked fields."""

    def test_value_appeared(self):
        assert has_value_changed('', 'X') is True
        assert has_value_changed(None, 'X') is True

    def test_same_value(self):
        assert has_value_changed('X', 'X') is False
        assert has_value_changed(' X ', 'X') is False

    def test_value_removed_is_not_a_change(self):
        assert has_value_changed('X', '') is False
        assert has_value_changed('X', None) is False

    def test_value_replaced(self):
        assert has_value_changed('X', 'Y') is True

    def test_both_empty(self):
        assert has_value_changed('', '') is False
        assert has_value_changed(None, '   ') is False


class TestDateNormalization:
    """Test FRL / LOG date normalization."""

    def test_serial_converted(self):
        assert normalize_date_for_comparison('40909') == '01/01/2012'
        assert normalize_date_for_comparison('41000') == '04/01/2012'
        assert normalize_date_for_comparison('45000') == '03/15/2023'

    def test_serial_with_time_fraction(self):
        assert normalize_date_for_comparison('45000.75') == '03/15/2023'

    def test_formatted_date_passes_through(self):
        assert normalize_date_for_comparison('01/01/2012') == '01/01/2012'
        assert normalize_date_for_comparison(' 3/15/2023 ') == '3/15/2023'

    def test_serial_range_is_exclusive(self):
        assert normalize_date_for_comparison('40000') == '40000'
        assert normalize_date_for_comparison('60000') == '60000'
        assert normalize_date_for_comparison('39999') == '39999'

    def test_other_values_pass_through(self):
        assert normalize_date_for_comparison('2023-03-15') == '2023-03-15'
        assert normalize_date_for_comparison('PENDING') == 'PENDING'

    def test_empty(self):
        assert normalize_date_for_comparison('') == ''
        assert normalize_date_for_comparison(None) == ''
        assert normalize_date_for_comparison('  ') == ''

    def test_idempotent(self):
        for raw in ['45000', '40909', '01/01/2012', '2023-03-15', '', '12', 'PENDING', '45000.5']:
            once = normalize_date_for_comparison(raw)
            assert normalize_date_for_comparison(once) == once
