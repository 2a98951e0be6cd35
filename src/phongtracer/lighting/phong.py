# lighting/phong.py
from phongtracer.core.color import Color
from phongtracer.core.tuple import Tuple, dot, reflect
from phongtracer.lighting.point_light import PointLight
from phongtracer.materials.material import Material


def lighting(material: Material, light: PointLight, point: Tuple,
             eye_vector: Tuple, normal_vector: Tuple) -> Color:
    """
    Shades a point with the Phong reflection model.

    Args:
        material: The surface material being lit.
        light: The light source illuminating the point.
        point: The point being illuminated.
        eye_vector: Unit vector from the point towards the eye.
        normal_vector: Unit surface normal at the point.

    Returns:
        Color: The sum of the ambient, diffuse and specular contributions.
    """
    effective_color = material.color * light.intensity
    light_vector = (light.position - point).normalize()
    ambient = effective_color * material.ambient

    # A negative cosine between light and normal means the light is on the
    # other side of the surface: only the ambient term remains.
    light_dot_normal = dot(light_vector, normal_vector)
    if light_dot_normal < 0:
        return ambient

    diffuse = effective_color * material.diffuse * light_dot_normal

    # The light reflects away from the eye, so there's no highlight.
    reflect_vector = reflect(-light_vector, normal_vector)
    reflect_dot_eye = dot(reflect_vector, eye_vector)
    if reflect_dot_eye <= 0:
        return ambient + diffuse

    factor = reflect_dot_eye ** material.shininess
    specular = light.intensity * material.specular * factor
    return ambient + diffuse + specular
