from mockapi.codegen import quick_generate


class TestQuickGenerate:
    def test_dependencies_first(self):
        files = quick_generate({"id": 1, "tags": [{"name": "new"}]}, "python", "User")
        assert list(files) == ["TagResponse.py", "UserResponse.py"]
        assert "class UserResponse(BaseModel):" in files["UserResponse.py"]
        assert "    tags: List[TagResponse]" in files["UserResponse.py"]

    def test_accepts_json_text(self):
        files = quick_generate('{"id": 1}', "ts", "Order")
        assert files == {
            "OrderResponse.ts": "export interface OrderResponse {\n  id: number;\n}\n"
        }

    def test_options(self):
        files = quick_generate({"id": 1}, "java", "User", suffix="Dto")
        assert "public class UserResponseDto" in files["UserResponse.java"]

    def test_non_object_yields_nothing(self):
        assert quick_generate([1, 2, 3]) == {}
