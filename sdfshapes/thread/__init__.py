"""Screw thread parameters, thread profiles and helical screw signed distance fields."""