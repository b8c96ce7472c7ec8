"""Base form for JSON request bodies."""

from flask import request
from flask_wtf import FlaskForm
from werkzeug.datastructures import MultiDict
from wtforms import Field


def _strip(value):
    return value.strip() if isinstance(value, str) else value


def _none_to_zero(value):
    return 0 if value is None else value


def _form_value(value):
    """Render a JSON scalar the way a browser would submit it."""
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, list):
        return [_form_value(v) for v in value]
    return value


class StringListField(Field):
    """JSON array of strings, e.g. tags or technologies."""

    def __init__(self, label=None, validators=None, max_items=50, **kwargs):
        super().__init__(label, validators, **kwargs)
        self.max_items = max_items

    def process_formdata(self, valuelist):
        items = [_strip(v) for v in valuelist if v not in (None, '')]
        if any(not isinstance(v, str) for v in items):
            self.data = []
            raise ValueError(self.gettext('Must be a list of strings.'))
        if len(items) > self.max_items:
            self.data = []
            raise ValueError(self.gettext('Too many items.'))
        self.data = items

    def _value(self):
        return ', '.join(self.data or [])


class JsonObjectField(Field):
    """JSON object with string values, e.g. social links."""

    def process_formdata(self, valuelist):
        if not valuelist or valuelist[0] == '':
            self.data = {}
            return
        value = valuelist[0]
        if not isinstance(value, dict) or \
                any(not isinstance(v, str) for v in value.values()):
            self.data = {}
            raise ValueError(self.gettext('Must be an object of strings.'))
        self.data = {str(k): v.strip() for k, v in value.items()}

    def _value(self):
        return ''


def _shape_error(field_class, value):
    """Message for a JSON value whose type cannot fill the field, else None."""
    if value is None:
        return None
    if issubclass(field_class, StringListField):
        return None if isinstance(value, list) else 'Must be an array of strings.'
    if issubclass(field_class, JsonObjectField):
        return None if isinstance(value, dict) else 'Must be an object.'
    if isinstance(value, (dict, list)):
        return 'Must be a single value, not an object or array.'
    return None


class JsonForm(FlaskForm):
    """Form fed from a JSON object instead of form-encoded data.

    Only keys present in the body count as submitted, so partial updates
    never overwrite columns the client did not send. Objects and arrays
    sent for single-valued fields fail validation instead of reaching
    the field.
    """

    class Meta:
        csrf = False

    def __init__(self, payload=None, **kwargs):
        if payload is None:
            payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            payload = {}
        self.payload = payload

        self.shape_errors = {}
        formdata = MultiDict()
        for name, unbound in self._unbound_fields:
            if name not in payload:
                continue
            error = _shape_error(unbound.field_class, payload[name])
            if error:
                self.shape_errors[name] = error
                continue
            # JSON null clears a field; WTForms treats '' as "no value"
            value = _form_value(payload[name])
            if isinstance(value, list):
                formdata.setlist(name, value)
            else:
                formdata.add(name, value)
        super().__init__(formdata=formdata, **kwargs)

    def validate(self, extra_validators=None):
        valid = super().validate(extra_validators)
        for name, message in self.shape_errors.items():
            self._fields[name].errors = [message]
            valid = False
        return valid

    def submitted_data(self):
        """Validated values for the fields present in the request body."""
        data = {}
        for name, field in self._fields.items():
            if name not in self.payload:
                continue
            value = field.data
            data[name] = None if value == '' else value
        return data
