from jinja2 import Environment, PackageLoader, select_autoescape
from typing import Any, Dict


def get_env() -> Environment:
    return Environment(
        loader=PackageLoader("famtree_py", "templates"),
        autoescape=select_autoescape(["html", "xml"]),
    )


def render_template(template_name: str, ctx: Dict[str, Any]) -> str:
    env = get_env()
    tmpl = env.get_template(template_name)
    return tmpl.render(**ctx)
