import datetime

import pytz
from django.test import SimpleTestCase

from ..conditions import ConditionEq, ConditionRange, ConditionStartsWith
from ..exceptions import *
from ..parser import PolicyParser, parse_policy
from .policies import *


class PolicyParserDegenerateTests(SimpleTestCase):

    def testParseNone(self):
        with self.assertRaises(MalformedDocument):
            parse_policy(None)

    def testParseEmpty(self):
        with self.assertRaises(MalformedDocument):
            parse_policy(b'')

    def testParseIllegalJson(self):
        with self.assertRaises(MalformedDocument):
            parse_policy(b'{"expiration": "2012-01-01T00:00:00.000Z", "conditions": [')

    def testParseNotAnObject(self):
        with self.assertRaises(MalformedDocument):
            parse_policy(b'[{"bucket": "b"}]')

    def testParseNoConditions(self):
        with self.assertRaises(MissingField) as cm:
            parse_policy(NO_CONDITION_POLICY)
        self.assertEqual(cm.exception.field, 'conditions')

    def testParseNoExpiration(self):
        with self.assertRaises(MissingField) as cm:
            parse_policy(NO_EXPIRATION_POLICY)
        self.assertEqual(cm.exception.field, 'expiration')

    def testParseIllegalExpiration(self):
        with self.assertRaises(MalformedDocument):
            parse_policy(b'{"expiration": "tomorrow", "conditions": []}')
        with self.assertRaises(MalformedDocument):
            parse_policy(b'{"expiration": 1000, "conditions": []}')
        with self.assertRaises(MalformedDocument):
            parse_policy(policy_with_expiration('0001-01-01T00:00:00+05:00'))
        with self.assertRaises(MalformedDocument):
            parse_policy(policy_with_expiration('9999-12-31T23:00:00-05:00'))

    def testParseConditionsNotAList(self):
        with self.assertRaises(MalformedDocument):
            parse_policy(b'{"expiration": "2012-01-01T00:00:00.000Z", "conditions": {"bucket": "b"}}')

    def testParseEmptyConditions(self):
        # An empty list is present, so only the required conditions are missing
        with self.assertRaises(MissingRequiredCondition):
            parse_policy(b'{"expiration": "2012-01-01T00:00:00.000Z", "conditions": []}')

    def testParseMissingBucketAndKey(self):
        with self.assertRaises(MissingRequiredCondition):
            parse_policy(MISSING_CONDITIONS_BUCKET_AND_KEY)

    def testParseMissingBucket(self):
        with self.assertRaises(MissingRequiredCondition) as cm:
            parse_policy(MISSING_CONDITIONS_BUCKET)
        self.assertEqual(cm.exception.field, 'bucket')

    def testParseMissingKey(self):
        with self.assertRaises(MissingRequiredCondition) as cm:
            parse_policy(MISSING_CONDITIONS_KEY)
        self.assertEqual(cm.exception.field, '$key')

    def testRemovingRequiredConditionFails(self):
        self.assertIsNotNone(parse_policy(policy_with_conditions('{"bucket": "b"}', '["starts-with", "$key", ""]')))
        with self.assertRaises(MissingRequiredCondition):
            parse_policy(policy_with_conditions('["starts-with", "$key", ""]'))
        with self.assertRaises(MissingRequiredCondition):
            parse_policy(policy_with_conditions('{"bucket": "b"}'))

    def testStartsWithWithoutSigil(self):
        with self.assertRaises(InvalidPrefixKey) as cm:
            parse_policy(STARTS_WITH_NO_SIGIL)
        self.assertEqual(cm.exception.key, 'key')

    def testIllegalEntries(self):
        required = ['{"bucket": "b"}', '{"$key": "k"}']
        illegal = [
            '{"a": "b", "c": "d"}',
            '{}',
            '{"a": 1}',
            '"bucket"',
            '12',
            'null',
            '[]',
            '["eq", "a"]',
            '["eq", "a", 1]',
            '["starts-with", "$a", null]',
            '[1, 2, 3]',
            '["foobar", "1", "10"]',
            '["foobar", true, 10]',
            '["foobar", 1, 10, 100]',
            '["foobar", NaN, Infinity]',
            '["foobar", 1, -Infinity]',
        ]
        for entry in illegal:
            with self.assertRaises(MalformedDocument, msg=entry):
                parse_policy(policy_with_conditions(*(required + [entry])))

    def testDocumentAndSignerErrorsAreDistinct(self):
        self.assertTrue(issubclass(MalformedDocument, PolicyDocumentException))
        self.assertTrue(issubclass(InvalidPrefixKey, PolicyDocumentException))
        self.assertTrue(issubclass(NoRawForm, PolicySignerException))
        self.assertFalse(issubclass(NoRawForm, PolicyDocumentException))


class PolicyParserTests(SimpleTestCase):

    def testParseExactMatch(self):
        policy = parse_policy(EXACT_MATCH)
        self.assertIs(type(policy.condition('el')), ConditionEq)
        self.assertIs(type(policy.condition('el2')), ConditionEq)
        self.assertEqual(policy.condition('el2').value_string(), 'val2')

    def testParseStartsWithMatch(self):
        policy = parse_policy(STARTS_WITH_MATCH)
        self.assertIs(type(policy.condition('$sw')), ConditionStartsWith)
        self.assertEqual(policy.condition('$sw').value_string(), 'val')

    def testParseRangeMatch(self):
        policy = parse_policy(RANGE_MATCH)
        condition = policy.condition('foobar')
        self.assertIs(type(condition), ConditionRange)
        self.assertEqual(condition.value_string(), '1 10')

    def testUnknownTagIsRange(self):
        policy = parse_policy(policy_with_conditions(
            '{"bucket": "b"}', '{"$key": "k"}', '["content-length-range", 0, 1048576.5]'
        ))
        self.assertEqual(policy.condition('content-length-range'), ConditionRange('content-length-range', 0, 1048576.5))

    def testParseKeepsOrder(self):
        policy = parse_policy(AWS_EXAMPLE_TEXT_AREA_UPLOAD_POLICY)
        self.assertEqual(policy.conditions, [
            ConditionEq('bucket', 'johnsmith'),
            ConditionStartsWith('$key', 'user/eric/'),
            ConditionEq('acl', 'public-read'),
            ConditionEq('success_action_redirect', 'http://johnsmith.s3.amazonaws.com/new_post.html'),
            ConditionEq('$Content-Type', 'text/html'),
            ConditionEq('x-amz-meta-uuid', '14365123651274'),
            ConditionStartsWith('$x-amz-meta-tag', ''),
        ])

    def testParseAWSFileUploadExample(self):
        policy = PolicyParser().parse(AWS_EXAMPLE_FILE_UPLOAD_POLICY.encode())
        self.assertEqual(policy.expiration, datetime.datetime(2007, 12, 1, 12, 0, 0, tzinfo=pytz.utc))
        self.assertTrue(policy.condition_matches('bucket', 'johnsmith'))
        self.assertTrue(policy.condition_matches('$key', 'user/eric/'))
        self.assertTrue(policy.condition_matches('acl', 'public-read'))
        self.assertTrue(policy.condition_matches(
            'success_action_redirect', 'http://johnsmith.s3.amazonaws.com/successful_upload.html'
        ))
        self.assertTrue(policy.condition_matches('$Content-Type', 'image/'))
        self.assertTrue(policy.condition_matches('x-amz-meta-uuid', '14365123651274'))
        self.assertTrue(policy.condition_matches('$x-amz-meta-tag', ''))

    def testParseAWSTextAreaExample(self):
        policy = parse_policy(AWS_EXAMPLE_TEXT_AREA_UPLOAD_POLICY)
        self.assertEqual(policy.expiration, datetime.datetime(2007, 12, 1, 12, 0, 0, tzinfo=pytz.utc))
        self.assertTrue(policy.condition_matches('success_action_redirect',
                                                 'http://johnsmith.s3.amazonaws.com/new_post.html'))
        self.assertTrue(policy.condition_matches('$Content-Type', 'text/html'))

    def testRawIsInputBytes(self):
        raw = AWS_EXAMPLE_FILE_UPLOAD_POLICY.encode()
        self.assertEqual(parse_policy(raw).raw, raw)
        self.assertEqual(parse_policy(bytearray(raw)).raw, raw)
        self.assertEqual(parse_policy(AWS_EXAMPLE_FILE_UPLOAD_POLICY).raw, raw)

    def testExpirationWithoutTimezoneIsUtc(self):
        policy = parse_policy(b'{"expiration": "2012-01-01T10:00:00", "conditions": [{"bucket": "b"}, {"$key": "k"}]}')
        self.assertEqual(policy.expiration, datetime.datetime(2012, 1, 1, 10, 0, 0, tzinfo=pytz.utc))

    def testExpirationDateOnly(self):
        policy = parse_policy(policy_with_expiration('2012-01-01'))
        self.assertEqual(policy.expiration, datetime.datetime(2012, 1, 1, 0, 0, 0, tzinfo=pytz.utc))
