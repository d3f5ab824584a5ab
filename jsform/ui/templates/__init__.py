from ..render import TemplateSet
from .base import FieldTemplate, PrimitiveTemplate, ErrorList, detach_all, path_key
from .string_field import string_template, InputField, TextareaField, SelectField, DateField
from .number_field import NumberField
from .boolean_field import boolean_template, CheckboxField, RadioField, SwitchField
from .object_field import ObjectField
from .array_field import ArrayField, ArrayRow

DEFAULT_TEMPLATES = TemplateSet(
    string_template=string_template,
    number_template=NumberField,
    boolean_template=boolean_template,
    object_template=ObjectField,
    array_template=ArrayField,
)
