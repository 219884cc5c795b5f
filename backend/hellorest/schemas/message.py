"""
HelloRest — Message Payload
============================

What:  A single-field text payload.
Who:   Returned by GET /camel/say/helloObject/{name}; rendered according to
       the process-wide binding mode (JSON, or XML when negotiated).
"""

import xml.etree.ElementTree as ET

from pydantic import BaseModel


class Message(BaseModel):
    text: str

    def to_xml(self) -> str:
        """Render as `<message><text>...</text></message>`."""
        root = ET.Element("message")
        ET.SubElement(root, "text").text = self.text
        return ET.tostring(root, encoding="unicode")

    def __str__(self) -> str:
        return self.text
