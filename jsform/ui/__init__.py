from .render import TemplateSet, TEMPLATE_KEYS, render_node
from .templates import DEFAULT_TEMPLATES
from .form_widget import SchemaForm
from .readonly_switch import ReadonlySwitch
