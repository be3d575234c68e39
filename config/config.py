"""配置文件"""
import logging

import numpy as np

# 数值参数
NUMERIC_CONFIG = {
    "operand_dtype": "uint32",  # 操作数与中间结果的取值范围
}

# 词法分析参数
TOKENIZER_CONFIG = {
    "skip_chars": " ",  # 只跳过空格；需要跳过所有空白时传入 string.whitespace
}

# RPN 输出与求值参数
RPN_CONFIG = {
    "output_separator": " ",
    "rpn_caret": "xor",     # evaluate_rpn 中 ^ 为按位异或
    "fused_caret": "pow",   # evaluate_infix_fused 中 ^ 为乘方
}

# 日志参数（库本身不调用 basicConfig，由调用方决定）
LOGGING_CONFIG = {
    "level": logging.INFO,
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


def operand_limits(dtype_name=None):
    """返回操作数取值范围 (min, max)"""
    info = np.iinfo(np.dtype(dtype_name or NUMERIC_CONFIG["operand_dtype"]))
    return int(info.min), int(info.max)


# 验证配置
def validate_config():
    """验证配置的合理性"""
    dtype = np.dtype(NUMERIC_CONFIG["operand_dtype"])
    assert np.issubdtype(dtype, np.unsignedinteger), "操作数必须是无符号整数"
    assert RPN_CONFIG["output_separator"] in TOKENIZER_CONFIG["skip_chars"], \
        "RPN 分隔符必须能被词法分析器跳过"
    assert RPN_CONFIG["rpn_caret"] in ("xor", "pow")
    assert RPN_CONFIG["fused_caret"] in ("xor", "pow")
    logging.getLogger(__name__).info("Configuration validated successfully!")
