#
# Tests for variable substitution, record resolution and parameter checks
#

from unittest import TestCase

from domainconnect_client.models import Template
from domainconnect_client.templates import (
    format_value,
    resolve_records,
    substitute,
    validate_parameters,
)


def _template(records, parameters=None):
    data = {
        'providerId': 'hosting-provider',
        'serviceId': 'web-hosting',
        'records': records,
    }
    if parameters is not None:
        data['parameters'] = parameters
    return Template.model_validate(data)


class TestFormatValue(TestCase):
    def test_scalars(self):
        self.assertEqual('true', format_value(True))
        self.assertEqual('false', format_value(False))
        self.assertEqual('0', format_value(0))
        self.assertEqual('42', format_value(42))
        self.assertEqual('3', format_value(3.0))
        self.assertEqual('1.5', format_value(1.5))
        self.assertEqual('192.0.2.1', format_value('192.0.2.1'))


class TestSubstitute(TestCase):
    def test_replaces_known_variables(self):
        self.assertEqual(
            'v=spf1 include:mail.example.net ~all',
            substitute(
                'v=spf1 include:%mailhost% ~all',
                {'mailhost': 'mail.example.net'},
            ),
        )

    def test_multiple_and_repeated_variables(self):
        self.assertEqual(
            'a-b-a',
            substitute('%x%-%y%-%x%', {'x': 'a', 'y': 'b'}),
        )

    def test_unknown_variables_left_in_place(self):
        self.assertEqual(
            '%typo%.example.com',
            substitute('%typo%.example.com', {'other': 'x'}),
        )

    def test_none_value_counts_as_unknown(self):
        self.assertEqual('%ip%', substitute('%ip%', {'ip': None}))

    def test_no_placeholders_is_identity(self):
        for text in ('', '@', 'www', '100%', 'a % b %', '%not valid%'):
            self.assertEqual(text, substitute(text, {'not': 'x', 'valid': 'y'}))

    def test_non_string_values(self):
        self.assertEqual(
            'www=true ttl=300 w=0 off=false',
            substitute(
                'www=%www% ttl=%ttl% w=%w% off=%off%',
                {'www': True, 'ttl': 300, 'w': 0, 'off': False},
            ),
        )

    def test_single_pass(self):
        # Substituted values are not rescanned
        self.assertEqual('%b%', substitute('%a%', {'a': '%b%', 'b': 'x'}))

    def test_identifier_characters(self):
        self.assertEqual(
            'ok-%has-dash%',
            substitute('%Var_1%-%has-dash%', {'Var_1': 'ok', 'has-dash': 'no'}),
        )


class TestResolveRecords(TestCase):
    def test_apex_without_host_unchanged(self):
        template = _template([{'type': 'A', 'host': '@', 'pointsTo': '%ip%'}])
        records = resolve_records(template, {'ip': '192.0.2.1'}, 'example.com')
        self.assertEqual('@', records[0].host)
        self.assertEqual('192.0.2.1', records[0].points_to)

    def test_apex_with_host_becomes_host(self):
        template = _template([{'type': 'A', 'host': '@', 'pointsTo': '%ip%'}])
        records = resolve_records(
            template, {'ip': '192.0.2.1'}, 'example.com', 'blog'
        )
        self.assertEqual('blog', records[0].host)

    def test_subdomain_variable_concatenated_under_host(self):
        template = _template(
            [
                {
                    'type': 'CNAME',
                    'host': '%subdomain%',
                    'pointsTo': 'cdn.example.net',
                }
            ]
        )
        records = resolve_records(
            template, {'subdomain': 'www'}, 'example.com', host='blog'
        )
        self.assertEqual('www.blog', records[0].host)
        self.assertEqual('cdn.example.net', records[0].points_to)

    def test_relative_host_without_caller_host(self):
        template = _template([{'type': 'A', 'host': 'www', 'pointsTo': '%ip%'}])
        records = resolve_records(template, {'ip': '192.0.2.1'}, 'example.com')
        self.assertEqual('www', records[0].host)

    def test_host_placeholder_without_host_is_apex(self):
        template = _template([{'type': 'TXT', 'host': '%host%', 'pointsTo': 'x'}])
        records = resolve_records(template, {}, 'example.com')
        self.assertEqual('@', records[0].host)

    def test_host_placeholder_with_host_not_doubled(self):
        template = _template([{'type': 'TXT', 'host': '%host%', 'pointsTo': 'x'}])
        records = resolve_records(template, {}, 'example.com', 'app')
        self.assertEqual('app', records[0].host)

    def test_host_placeholder_from_params_takes_precedence(self):
        # A host param substitutes %host% before the sentinel is checked
        template = _template([{'type': 'TXT', 'host': '%host%', 'pointsTo': 'x'}])
        records = resolve_records(template, {'host': 'mail'}, 'example.com')
        self.assertEqual('mail', records[0].host)

    def test_empty_host_treated_as_absent(self):
        template = _template(
            [
                {'type': 'A', 'host': '@', 'pointsTo': '%ip%'},
                {'type': 'A', 'host': 'www', 'pointsTo': '%ip%'},
            ]
        )
        records = resolve_records(template, {'ip': '192.0.2.1'}, 'example.com', '')
        self.assertEqual(['@', 'www'], [r.host for r in records])

    def test_unresolved_host_variable_concatenated(self):
        template = _template([{'type': 'CNAME', 'host': '%sub%', 'pointsTo': 'x'}])
        records = resolve_records(template, {}, 'example.com', 'blog')
        self.assertEqual('%sub%.blog', records[0].host)

    def test_missing_points_to_stays_missing(self):
        template = _template([{'type': 'SPFM', 'host': '@'}])
        records = resolve_records(template, {'ip': 'x'}, 'example.com')
        self.assertIsNone(records[0].points_to)

    def test_other_fields_and_order_preserved(self):
        template = _template(
            [
                {
                    'type': 'SRV',
                    'host': '_sip._tcp',
                    'pointsTo': '%target%',
                    'ttl': 600,
                    'priority': 10,
                    'weight': 20,
                    'port': 5060,
                },
                {
                    'type': 'MX',
                    'host': '@',
                    'pointsTo': 'mx.%domain%',
                    'priority': 5,
                    'groupId': 'mail',
                },
            ]
        )
        records = resolve_records(
            template,
            {'target': 'sip.example.net', 'domain': 'example.com'},
            'example.com',
        )
        self.assertEqual(['SRV', 'MX'], [r.type for r in records])
        srv, mx = records
        self.assertEqual(
            (600, 10, 20, 5060), (srv.ttl, srv.priority, srv.weight, srv.port)
        )
        self.assertEqual('sip.example.net', srv.points_to)
        self.assertEqual('mx.example.com', mx.points_to)
        self.assertEqual(5, mx.priority)
        self.assertEqual('mail', mx.model_dump(by_alias=True)['groupId'])

    def test_template_not_modified(self):
        template = _template([{'type': 'A', 'host': '@', 'pointsTo': '%ip%'}])
        resolve_records(template, {'ip': '192.0.2.1'}, 'example.com', 'blog')
        self.assertEqual('@', template.records[0].host)
        self.assertEqual('%ip%', template.records[0].points_to)


class TestValidateParameters(TestCase):
    parameters = [
        {'name': 'ip', 'dataType': 'STRING', 'required': True},
        {'name': 'www', 'dataType': 'BOOLEAN', 'required': False},
        {'name': 'ttl', 'dataType': 'NUMBER', 'required': True},
        {'name': 'note'},
    ]

    def test_no_parameters_declared(self):
        result = validate_parameters(_template([]), {})
        self.assertTrue(result.valid)
        self.assertEqual([], result.missing)

    def test_all_required_present(self):
        template = _template([], self.parameters)
        result = validate_parameters(template, {'ip': '192.0.2.1', 'ttl': 300})
        self.assertTrue(result.valid)
        self.assertEqual([], result.missing)

    def test_missing_in_declaration_order(self):
        template = _template([], self.parameters)
        result = validate_parameters(template, {'www': True})
        self.assertFalse(result.valid)
        self.assertEqual(['ip', 'ttl'], result.missing)

    def test_falsy_values_count_as_provided(self):
        template = _template([], self.parameters)
        result = validate_parameters(template, {'ip': '', 'ttl': 0})
        self.assertTrue(result.valid)
        result = validate_parameters(template, {'ip': False, 'ttl': 0.0})
        self.assertTrue(result.valid)

    def test_none_value_counts_as_missing(self):
        template = _template([], self.parameters)
        result = validate_parameters(template, {'ip': None, 'ttl': 1})
        self.assertEqual(['ip'], result.missing)
